"""
Unit tests for the pattern compiler.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from text_integrity.profanity.compiler import (
    CharClass,
    Literal,
    PatternCompiler,
    Separator,
    build_steps,
    compile_root,
    lower,
    lower_any,
    lower_step,
)
from text_integrity.profanity.substitutions import LEETSPEAK_MAP, SubstitutionTable


# ---------------------------------------------------------------------------
# AST construction
# ---------------------------------------------------------------------------

class TestBuildSteps:
    def test_known_letters_become_classes(self):
        steps = build_steps("ab")
        assert steps == (
            CharClass(("a", "4", "@", "e")),
            CharClass(("b", "8", "6")),
        )

    def test_unknown_letters_become_literals(self):
        assert build_steps("hd") == (Literal("h"), Literal("d"))

    def test_root_is_lowercased(self):
        assert build_steps("HD") == (Literal("h"), Literal("d"))

    def test_separators_only_between_letters(self):
        steps = build_steps("hd", separators=".-", max_run=2)
        assert steps == (Literal("h"), Separator(".-", 2), Literal("d"))

    def test_separator_minimum_is_carried(self):
        steps = build_steps("hd", separators=" ", max_run=2, min_run=1)
        assert steps[1] == Separator(" ", 2, 1)

    def test_single_letter_has_no_separator(self):
        assert build_steps("h", separators=".") == (Literal("h"),)

    def test_custom_table(self):
        table = SubstitutionTable({"h": ["#"]})
        assert build_steps("h", table) == (CharClass(("h", "#")),)


# ---------------------------------------------------------------------------
# Lowering to regex source
# ---------------------------------------------------------------------------

class TestLowering:
    def test_literal_is_escaped(self):
        assert lower_step(Literal(".")) == r"\."

    def test_single_char_class(self):
        assert lower_step(CharClass(("b", "8"))) == "[b8]"

    def test_class_members_are_escaped(self):
        assert lower_step(CharClass(("i", "|"))) == r"[i\|]"

    def test_multi_char_alternatives_longest_first(self):
        source = lower_step(CharClass(("o", "0", "()", "@")))
        assert source.startswith(r"(?:\(\)|")

    def test_elongation_quantifier(self):
        assert lower_step(Literal("h"), elongate=True) == "h+"

    def test_separator_is_bounded(self):
        assert lower_step(Separator(".", 3)) == r"[\.]{0,3}"

    def test_separator_minimum_run(self):
        assert lower_step(Separator(".", 3, min_run=1)) == r"[\.]{1,3}"

    def test_separator_is_never_elongated(self):
        assert lower_step(Separator(".", 3), elongate=True) == r"[\.]{0,3}"

    def test_whole_word_guards(self):
        source = lower((Literal("h"),), whole_word=True)
        assert source.startswith("(?<!")
        assert source.endswith(")")

    def test_variants_become_one_alternation(self):
        source = lower_any([(Literal("a"),), (Literal("b"),)])
        assert source == "(?:a|b)"

    def test_variants_share_whole_word_guards(self):
        source = lower_any([(Literal("a"),), (Literal("b"),)], whole_word=True)
        assert "(?:a|b)" in source
        assert source.startswith("(?<!")


# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------

class TestCompiledPattern:
    def test_digit_look_alike(self):
        compiled = compile_root("bad")
        assert compiled.matches("so b4d") == ["b4d"]

    def test_case_insensitive(self):
        assert compile_root("bad").matches("BAD") == ["BAD"]

    def test_elongation(self):
        assert compile_root("bad").matches("baaaaad") == ["baaaaad"]

    def test_bounded_rejects_embedded_root(self):
        compiled = compile_root("bad")
        assert compiled.matches("badminton") == []
        assert compiled.pattern.search("badminton") is not None

    def test_bounded_rejects_trailing_digit(self):
        assert compile_root("bad").matches("bad2") == []

    def test_underscore_counts_as_word_boundary(self):
        assert compile_root("bad").matches("_bad_") == ["bad"]

    def test_separated_variant(self):
        compiled = compile_root("shit")
        assert compiled.matches("s.h.i.t", separated=True) == ["s.h.i.t"]
        assert compiled.matches("s h i t", separated=True) == ["s h i t"]

    def test_separator_run_is_bounded(self):
        compiled = compile_root("shit")
        assert compiled.matches("s....h.i.t", separated=True) == []

    def test_no_leading_separator(self):
        compiled = compile_root("shit")
        assert compiled.matches(".shit", separated=True) == ["shit"]

    def test_separated_rejects_letters_glued_to_a_word(self):
        compiled = compile_root("shit")
        assert compiled.matches("this hit", separated=True) == []

    def test_punctuation_inside_one_token(self):
        assert compile_root("bitch").matches("bi-tch", separated=True) == ["bi-tch"]
        assert compile_root("fck").matches("f*ck", separated=True) == ["f*ck"]

    def test_spaced_letters_need_a_separator_in_every_gap(self):
        compiled = compile_root("shit")
        assert compiled.matches("s. h. i. t", separated=True) == ["s. h. i. t"]
        assert compiled.matches("s hi t", separated=True) == []

    @pytest.mark.parametrize("text, root", [
        ("The U.S. hit a record high.", "shit"),
        ("P.S. hit me up later.", "shit"),
        ("Plan B. Itch cream is sold out.", "bitch"),
        ("so mad na mo", "namo"),
    ])
    def test_letters_are_not_borrowed_across_words(self, text, root):
        compiled = compile_root(root)
        assert compiled.matches(text, separated=True) == []
        assert compiled.separated.search(text) is None

    def test_whitespace_only_separators(self):
        compiled = compile_root("shit", separators=" ")
        assert compiled.matches("s h i t", separated=True) == ["s h i t"]
        assert compiled.matches("s.h.i.t", separated=True) == []

    def test_multi_char_look_alike(self):
        assert compile_root("porn").matches("p()rn") == ["p()rn"]

    def test_non_letter_root_compiles(self):
        compiled = compile_root("a+b")
        assert compiled.matches("a+b") == ["a+b"]

    def test_search(self):
        compiled = compile_root("shit")
        assert compiled.search("oh s-h-i-t")
        assert not compiled.search("nothing to see here")


# ---------------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------------

class TestPatternCompiler:
    def test_compile_is_memoized(self):
        compiler = PatternCompiler()
        assert compiler.compile("bad") is compiler.compile("bad")

    def test_cache_key_is_case_insensitive(self):
        compiler = PatternCompiler()
        assert compiler.compile("BAD") is compiler.compile("bad")
        assert len(compiler) == 1

    def test_contains(self):
        compiler = PatternCompiler()
        assert "bad" not in compiler
        compiler.compile("bad")
        assert "bad" in compiler
        assert "BAD" in compiler

    def test_caches_are_per_instance(self):
        first, second = PatternCompiler(), PatternCompiler()
        first.compile("bad")
        assert len(second) == 0

    def test_warm_up(self):
        compiler = PatternCompiler()
        assert compiler.warm_up(["bad", "worse", "bad"]) == 2

    def test_max_separator_run(self):
        compiler = PatternCompiler(max_separator_run=1)
        compiled = compiler.compile("shit")
        assert compiled.matches("s.h.i.t", separated=True) == ["s.h.i.t"]
        assert compiled.matches("s..h.i.t", separated=True) == []

    def test_uses_given_table(self):
        compiler = PatternCompiler(table=LEETSPEAK_MAP)
        assert compiler.table is LEETSPEAK_MAP

    def test_concurrent_first_compile_is_idempotent(self):
        compiler = PatternCompiler()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: compiler.compile("fuck"), range(32)))
        assert all(r is results[0] for r in results)
        assert len(compiler) == 1
