"""
Word lists and misspelling maps for English and Filipino.

The common-word sets are ordered: nearest-word search walks them in the
order written here, so earlier words win ties.
"""

from ..lookup import CorrectionMap, WordSet

ENGLISH_WORDS = WordSet([
    # Articles, pronouns, prepositions
    'a', 'an', 'the', 'and', 'or', 'but', 'if', 'then', 'else', 'when', 'where', 'why', 'how', 'what', 'who', 'which',
    'i', 'me', 'my', 'mine', 'we', 'us', 'our', 'ours', 'you', 'your', 'yours', 'he', 'him', 'his', 'she', 'her', 'hers',
    'it', 'its', 'they', 'them', 'their', 'theirs', 'this', 'that', 'these', 'those', 'here', 'there', 'all', 'any',
    'both', 'each', 'few', 'more', 'most', 'other', 'some', 'such', 'no', 'nor', 'not', 'only', 'own', 'same', 'so',
    'than', 'too', 'very', 'just', 'also', 'now', 'even', 'still', 'already', 'always', 'never', 'often', 'sometimes',
    'at', 'by', 'for', 'from', 'in', 'into', 'of', 'on', 'to', 'with', 'about', 'after', 'before', 'between', 'under',
    'over', 'through', 'during', 'without', 'within', 'along', 'among', 'around', 'behind', 'below', 'beside', 'beyond',
    'against', 'across', 'above', 'upon', 'until', 'since', 'because', 'while', 'although', 'unless', 'whether',
    'everyone', 'everybody', 'someone', 'somebody', 'anyone', 'anybody', 'nobody', 'everything', 'something',
    'anything', 'nothing', 'itself', 'myself', 'yourself', 'himself', 'herself', 'ourselves', 'themselves', 'whose',
    # Common verbs
    'is', 'are', 'was', 'were', 'be', 'been', 'being', 'have', 'has', 'had', 'having', 'do', 'does', 'did', 'doing',
    'will', 'would', 'could', 'should', 'may', 'might', 'must', 'shall', 'can', 'need', 'dare', 'ought', 'used',
    'go', 'goes', 'going', 'went', 'gone', 'get', 'gets', 'got', 'getting', 'make', 'makes', 'made', 'making',
    'know', 'knows', 'knew', 'known', 'knowing', 'think', 'thinks', 'thought', 'thinking', 'take', 'takes', 'took', 'taken',
    'see', 'sees', 'saw', 'seen', 'seeing', 'come', 'comes', 'came', 'coming', 'want', 'wants', 'wanted', 'wanting',
    'give', 'gives', 'gave', 'given', 'giving', 'use', 'uses', 'using', 'find', 'finds', 'found', 'finding',
    'tell', 'tells', 'told', 'telling', 'ask', 'asks', 'asked', 'asking', 'work', 'works', 'worked', 'working',
    'seem', 'seems', 'seemed', 'seeming', 'feel', 'feels', 'felt', 'feeling', 'try', 'tries', 'tried', 'trying',
    'leave', 'leaves', 'left', 'leaving', 'call', 'calls', 'called', 'calling', 'keep', 'keeps', 'kept', 'keeping',
    'let', 'lets', 'letting', 'begin', 'begins', 'began', 'begun', 'show', 'shows', 'showed', 'shown', 'showing',
    'hear', 'hears', 'heard', 'hearing', 'play', 'plays', 'played', 'playing', 'run', 'runs', 'ran', 'running',
    'move', 'moves', 'moved', 'moving', 'live', 'lives', 'lived', 'living', 'believe', 'believes', 'believed',
    'hold', 'holds', 'held', 'holding', 'bring', 'brings', 'brought', 'bringing', 'happen', 'happens', 'happened',
    'write', 'writes', 'wrote', 'written', 'writing', 'provide', 'provides', 'provided', 'providing',
    'sit', 'sits', 'sat', 'sitting', 'stand', 'stands', 'stood', 'standing', 'lose', 'loses', 'lost', 'losing',
    'pay', 'pays', 'paid', 'paying', 'meet', 'meets', 'met', 'meeting', 'include', 'includes', 'included',
    'continue', 'continues', 'continued', 'set', 'sets', 'setting', 'learn', 'learns', 'learned', 'learning',
    'change', 'changes', 'changed', 'changing', 'lead', 'leads', 'led', 'leading', 'understand', 'understands',
    'watch', 'watches', 'watched', 'watching', 'follow', 'follows', 'followed', 'following', 'stop', 'stops',
    'create', 'creates', 'created', 'creating', 'speak', 'speaks', 'spoke', 'spoken', 'speaking', 'read', 'reads',
    'spend', 'spends', 'spent', 'spending', 'grow', 'grows', 'grew', 'grown', 'growing', 'open', 'opens', 'opened',
    'walk', 'walks', 'walked', 'walking', 'win', 'wins', 'won', 'winning', 'offer', 'offers', 'offered', 'offering',
    'remember', 'remembers', 'remembered', 'consider', 'considers', 'considered', 'appear', 'appears', 'appeared',
    'buy', 'buys', 'bought', 'buying', 'wait', 'waits', 'waited', 'waiting', 'serve', 'serves', 'served', 'serving',
    'die', 'dies', 'died', 'dying', 'send', 'sends', 'sent', 'sending', 'expect', 'expects', 'expected', 'expecting',
    'build', 'builds', 'built', 'building', 'stay', 'stays', 'stayed', 'staying', 'fall', 'falls', 'fell', 'fallen',
    'cut', 'cuts', 'cutting', 'reach', 'reaches', 'reached', 'reaching', 'kill', 'kills', 'killed', 'killing',
    'remain', 'remains', 'remained', 'suggest', 'suggests', 'suggested', 'raise', 'raises', 'raised', 'raising',
    'pass', 'passes', 'passed', 'passing', 'sell', 'sells', 'sold', 'selling', 'require', 'requires', 'required',
    'report', 'reports', 'reported', 'decide', 'decides', 'decided', 'pull', 'pulls', 'pulled', 'pulling',
    'bring', 'eat', 'eats', 'ate', 'eaten', 'drink', 'drinks', 'drank', 'sleep', 'sleeps', 'slept', 'wake',
    'help', 'helps', 'helped', 'helping', 'start', 'starts', 'started', 'starting', 'end', 'ends', 'ended',
    'close', 'closes', 'closed', 'closing', 'finish', 'finished', 'plan', 'plans', 'planned', 'prepare',
    'prepared', 'bring', 'return', 'returns', 'returned', 'arrive', 'arrived', 'allow', 'allowed', 'receive',
    'received', 'apply', 'applied', 'enroll', 'enrolled', 'practice', 'study', 'studied', 'studying', 'teach',
    'taught', 'explain', 'explained', 'discuss', 'discussed', 'answer', 'answered', 'love', 'loved', 'like',
    'liked', 'hope', 'hoped', 'look', 'looks', 'looked', 'looking', 'turn', 'turned', 'talk', 'talked',
    # Common nouns
    'time', 'year', 'people', 'way', 'day', 'man', 'woman', 'child', 'children', 'world', 'life', 'hand', 'part',
    'place', 'case', 'week', 'company', 'system', 'program', 'question', 'government', 'number', 'night',
    'point', 'home', 'water', 'room', 'mother', 'area', 'money', 'story', 'fact', 'month', 'lot', 'right', 'study',
    'book', 'eye', 'job', 'word', 'business', 'issue', 'side', 'kind', 'head', 'house', 'service', 'friend', 'father',
    'power', 'hour', 'game', 'line', 'member', 'law', 'car', 'city', 'community', 'name', 'president', 'team',
    'minute', 'idea', 'kid', 'body', 'information', 'back', 'parent', 'face', 'others', 'level', 'office', 'door',
    'health', 'person', 'art', 'war', 'history', 'party', 'result', 'morning', 'reason', 'research', 'girl',
    'guy', 'moment', 'air', 'teacher', 'force', 'education', 'student', 'students', 'class', 'classes', 'school',
    'university', 'college', 'campus', 'semester', 'course', 'courses', 'subject', 'subjects', 'exam', 'exams',
    'test', 'tests', 'grade', 'grades', 'professor', 'lecture', 'assignment', 'project', 'deadline', 'schedule',
    'announcement', 'announcements', 'event', 'events', 'meeting', 'meetings', 'activity', 'activities',
    'organization', 'department', 'faculty', 'staff', 'admin', 'building', 'library',
    'dog', 'dogs', 'cat', 'cats', 'food', 'lunch', 'dinner', 'breakfast', 'hall', 'gym', 'field', 'court',
    'floor', 'desk', 'chair', 'paper', 'papers', 'form', 'forms', 'fee', 'fees', 'uniform', 'library',
    'laboratory', 'lab', 'canteen', 'hallway', 'auditorium', 'gate', 'parking', 'security', 'guard', 'clinic',
    'nurse', 'dean', 'registrar', 'officer', 'officers', 'club', 'clubs', 'council', 'election', 'vote',
    'votes', 'seminar', 'workshop', 'orientation', 'graduation', 'ceremony', 'celebration', 'holiday',
    'break', 'vacation', 'weather', 'rain', 'storm', 'typhoon', 'suspension', 'safety', 'drill', 'fire',
    'emergency', 'update', 'updates', 'rule', 'rules', 'policy', 'policies', 'requirement', 'requirements',
    'section', 'sections', 'quiz', 'quizzes', 'score', 'scores', 'result', 'results', 'list', 'message',
    'phone', 'number', 'website', 'portal', 'account', 'password', 'letter', 'future', 'group', 'groups',
    # Common adjectives
    'good', 'new', 'first', 'last', 'long', 'great', 'little', 'old', 'big', 'high', 'small',
    'large', 'next', 'early', 'young', 'important', 'public', 'bad', 'able', 'human', 'local', 'sure',
    'free', 'better', 'best', 'true', 'full', 'special', 'easy', 'clear', 'recent', 'certain', 'personal',
    'red', 'black', 'white', 'blue', 'green', 'strong', 'possible', 'whole', 'real', 'available', 'different',
    'happy', 'sorry', 'nice', 'hard', 'late', 'past', 'common', 'low', 'short', 'natural', 'significant',
    'weird', 'strange', 'final', 'official', 'required', 'optional', 'welcome', 'ready', 'busy', 'safe',
    'wrong', 'correct', 'several', 'many', 'much', 'less', 'least', 'worse', 'worst', 'greater', 'smaller',
    'bigger', 'larger', 'higher', 'lower', 'quick', 'slow', 'upcoming', 'monthly', 'weekly', 'daily',
    # Common adverbs
    'up', 'out', 'down', 'off', 'well', 'away', 'really', 'again', 'once', 'later', 'today',
    'together', 'please', 'thank', 'thanks', 'okay', 'yes', 'maybe', 'however', 'therefore', 'though',
    'tomorrow', 'yesterday', 'tonight', 'soon', 'ago', 'instead', 'almost', 'enough', 'quite', 'perhaps',
    # Days, months
    'monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday',
    'january', 'february', 'march', 'april', 'june', 'july', 'august', 'september', 'october', 'november', 'december',
    # Numbers as words
    'one', 'two', 'three', 'four', 'five', 'six', 'seven', 'eight', 'nine', 'ten', 'hundred', 'thousand',
    # Action words common in announcements
    'join', 'attend', 'register', 'sign', 'submit', 'complete', 'participate', 'visit', 'check', 'contact',
    'email', 'notify', 'inform', 'share', 'post', 'upload', 'download', 'view', 'click',
    'confirm', 'cancel', 'reschedule', 'postpone', 'extend', 'remind', 'reminder', 'note', 'notice', 'attention',
    'details', 'detail', 'regarding', 'concerning', 'topic', 'agenda', 'venue', 'date', 'dates',
])

FILIPINO_WORDS = WordSet([
    # Pronouns
    'ako', 'ikaw', 'ka', 'siya', 'kami', 'tayo', 'kayo', 'sila', 'niya', 'nila', 'natin', 'namin', 'ninyo',
    'ko', 'mo', 'nito', 'niyan', 'niyon', 'akin', 'iyo', 'atin', 'amin', 'inyo', 'kanila', 'kanya',
    'ito', 'iyan', 'iyon', 'dito', 'diyan', 'doon', 'rito', 'riyan', 'roon', 'sino', 'ano', 'alin',
    # Linkers and particles
    'sa', 'si', 'ni', 'ng', 'kay', 'kina', 'nina', 'ang', 'mga', 'na', 'pa', 'at', 'o', 'ay',
    'kong', 'mong', 'nang', 'kung', 'pang', 'sang',
    # Common verbs
    'magpunta', 'pumunta', 'punta', 'pupunta', 'pumupunta', 'gumawa', 'gagawa', 'gumagawa', 'gawa', 'gagawin',
    'kumain', 'kakain', 'kumakain', 'kain', 'uminom', 'iinom', 'umiinom', 'inom',
    'maglaro', 'naglaro', 'naglalaro', 'maglalaro', 'laro', 'magtrabaho', 'nagtrabaho', 'nagtatrabaho',
    'magbasa', 'nagbasa', 'nagbabasa', 'magbabasa', 'basa', 'magsulat', 'nagsulat', 'nagsusulat',
    'makinig', 'nakinig', 'nakikinig', 'makikinig', 'kinig', 'magsalita', 'nagsalita', 'nagsasalita',
    'dumating', 'darating', 'dumarating', 'dating', 'umalis', 'aalis', 'umaalis', 'alis',
    'bumili', 'bibili', 'bumibili', 'bili', 'magbenta', 'nagbenta', 'nagbebenta', 'benta',
    'magluto', 'nagluto', 'nagluluto', 'magluluto', 'luto', 'maglinis', 'naglinis', 'naglilinis',
    'maghugas', 'naghugas', 'naghuhugas', 'hugas', 'matulog', 'natulog', 'natutulog', 'matutulog', 'tulog',
    'gumising', 'gigising', 'gumigising', 'gising', 'umuwi', 'uuwi', 'umuuwi', 'uwi',
    'sumama', 'sasama', 'sumasama', 'sama', 'tumulong', 'tutulong', 'tumutulong', 'tulong',
    'magbigay', 'nagbigay', 'nagbibigay', 'bigay', 'kumuha', 'kukuha', 'kumukuha', 'kuha',
    'magtanong', 'nagtanong', 'nagtatanong', 'tanong', 'sumagot', 'sasagot', 'sumasagot', 'sagot',
    'magpasalamat', 'nagpasalamat', 'nagpapasalamat', 'pasalamat', 'salamat',
    'magpatawad', 'nagpatawad', 'nagpapatawad', 'patawad', 'tawad',
    'huwag', 'wag', 'dapat', 'kailangan', 'gusto', 'ayaw', 'maaari', 'pwede', 'puwede',
    # Common nouns
    'tao', 'araw', 'gabi', 'umaga', 'hapon', 'tanghali', 'oras', 'minuto', 'segundo',
    'linggo', 'buwan', 'taon', 'panahon', 'lugar', 'bahay', 'paaralan', 'eskwela', 'eskuwelahan',
    'trabaho', 'opisina', 'gusali', 'silid', 'kwarto', 'klase', 'estudyante', 'guro', 'titser',
    'kaibigan', 'pamilya', 'magulang', 'ama', 'ina', 'tatay', 'nanay', 'lolo', 'lola',
    'anak', 'kapatid', 'kuya', 'ate', 'bunso', 'pangalan', 'edad', 'tirahan', 'address',
    'pagkain', 'tubig', 'kape', 'tsaa', 'gatas', 'tinapay', 'kanin', 'ulam', 'prutas', 'gulay',
    'libro', 'papel', 'lapis', 'bolpen', 'kuwaderno', 'bag', 'cellphone', 'telepono', 'kompyuter',
    'kotse', 'bus', 'jeep', 'jeepney', 'tricycle', 'traysikel', 'motorsiklo', 'bisikleta',
    'pera', 'salapi', 'presyo', 'bayad', 'suweldo', 'sahod', 'gastos', 'ipon', 'utang',
    'balita', 'pahayagan', 'anunsyo', 'paunawa', 'abiso', 'mensahe', 'sulat', 'liham',
    'pulong', 'miting', 'programa', 'aktibidad', 'gawain', 'proyekto', 'eksamen', 'pagsusulit',
    'iskedyul', 'palatuntunan', 'okasyon', 'selebrasyon', 'kasiyahan', 'kaganapan',
    # Common adjectives
    'maganda', 'ganda', 'pangit', 'mabuti', 'masama', 'malaki', 'maliit', 'mahaba', 'maikli',
    'matangkad', 'mababa', 'mataas', 'mabilis', 'mabagal', 'malamig', 'mainit', 'malambot', 'matigas',
    'matamis', 'maalat', 'maasim', 'mapait', 'maanghang', 'masarap', 'malasa',
    'malinis', 'marumi', 'maliwanag', 'madilim', 'tahimik', 'maingay', 'malayo', 'malapit',
    'bago', 'luma', 'bata', 'matanda', 'payat', 'mataba', 'masaya', 'malungkot', 'galit',
    'takot', 'gutom', 'busog', 'uhaw', 'pagod', 'antok', 'handa', 'abala', 'libre',
    'mahal', 'mura', 'madali', 'mahirap', 'simple', 'kumplikado', 'totoo', 'peke',
    # Common adverbs and particles
    'lang', 'lamang', 'din', 'rin', 'man', 'naman', 'nga', 'po', 'ho',
    'oo', 'hindi', 'di', 'opo', 'oho', 'sige', 'teka', 'sandali', 'mamaya', 'kanina', 'kahapon',
    'bukas', 'ngayon', 'kailan', 'paano', 'bakit', 'saan', 'nasaan', 'gaano',
    'madalas', 'palagi', 'lagi', 'minsan', 'paminsan', 'kaunti', 'konti', 'marami', 'madami', 'lahat', 'wala',
    'may', 'mayroon', 'meron', 'kasi', 'dahil', 'sapagkat', 'para', 'upang', 'hanggang',
    'pagkatapos', 'habang', 'kapag', 'kahit', 'pero', 'ngunit', 'subalit', 'siguro', 'basta',
    'daw', 'raw', 'pala', 'yata', 'ata', 'kaya', 'sana', 'tuloy', 'muna', 'ulit',
    'ayoko', 'ayos', 'ba', 'e', 'eh', 'tapos', 'tas', 'tsaka', 'pati',
    'yung', 'yun', 'yon', 'itong', 'iyang', 'iyong', 'dine', 'nandito', 'nandyan', 'nandoon',
    # Common expressions
    'kamusta', 'kumusta', 'maraming', 'pasensya', 'paumanhin', 'sori',
    'ingat', 'paalam', 'babay', 'bye', 'magandang', 'maligayang', 'bati', 'pagbati',
    # Days of the week
    'lunes', 'martes', 'miyerkules', 'miyerkoles', 'huwebes', 'biyernes', 'sabado',
    # Months
    'enero', 'pebrero', 'marso', 'abril', 'mayo', 'hunyo', 'hulyo', 'agosto', 'setyembre', 'oktubre', 'nobyembre', 'disyembre',
    # Numbers
    'isa', 'dalawa', 'tatlo', 'apat', 'lima', 'anim', 'pito', 'walo', 'siyam', 'sampu',
    'labing', 'labinisa', 'labingdalawa', 'dalawampu', 'tatlumpu', 'apatnapu', 'limampu',
    'animnapu', 'pitumpu', 'walumpu', 'siyamnapu', 'sandaan', 'isanlibo',
])

# Text-speak and typos (misspelled -> correct)
FILIPINO_MISSPELLINGS = CorrectionMap({
    'nman': 'naman',
    'nmn': 'naman',
    'kc': 'kasi',
    'kse': 'kasi',
    'kci': 'kasi',
    'dn': 'din',
    'rn': 'rin',
    'poh': 'po',
    'pow': 'po',
    'nyo': 'ninyo',
    'ntin': 'natin',
    'nmin': 'namin',
    'aq': 'ako',
    'aqo': 'ako',
    'cya': 'siya',
    'xa': 'siya',
    'cla': 'sila',
    'xla': 'sila',
    'cnu': 'sino',
    'xno': 'sino',
    'cno': 'sino',
    'anu': 'ano',
    'anoh': 'ano',
    'bkit': 'bakit',
    'bket': 'bakit',
    'ggwin': 'gagawin',
    'pgkain': 'pagkain',
    'pra': 'para',
    'praa': 'para',
    'sau': 'sa iyo',
    'sayu': 'sa iyo',
    'sayo': 'sa iyo',
    'kau': 'kayo',
    'kyuh': 'kayo',
    'tpos': 'tapos',
    'tps': 'tapos',
    'tpus': 'tapos',
    'lng': 'lang',
    'lngg': 'lang',
    'cguro': 'siguro',
    'cgro': 'siguro',
    'sguro': 'siguro',
    'mganda': 'maganda',
    'gnda': 'ganda',
    'mhal': 'mahal',
    'mhl': 'mahal',
    'slmat': 'salamat',
    'slmt': 'salamat',
    'tnx': 'salamat',
    'ty': 'salamat',
    'thnks': 'salamat',
    'gud': 'good',
    'gd': 'good',
    'nid': 'need',
    'nd': 'and',
    'dis': 'this',
    'dat': 'that',
    'dto': 'dito',
    'dyan': 'diyan',
    'dun': 'doon',
    'dne': 'dine',
    'gsto': 'gusto',
    'gstu': 'gusto',
    'gustu': 'gusto',
    'ayku': 'ayoko',
    'ayq': 'ayoko',
    'bsta': 'basta',
    'proh': 'pero',
    'hnd': 'hindi',
    'hinde': 'hindi',
    'hndih': 'hindi',
    'hndi': 'hindi',
    'ndi': 'hindi',
    'wla': 'wala',
    'wlah': 'wala',
    'mrami': 'marami',
    'mdami': 'madami',
    'konte': 'konti',
    'knti': 'konti',
    'mna': 'muna',
    'mnya': 'mamaya',
    'mmya': 'mamaya',
    'mmaya': 'mamaya',
    'sge': 'sige',
    'cge': 'sige',
    'cgie': 'sige',
    'opoh': 'opo',
    'opow': 'opo',
    'opu': 'opo',
    'ingts': 'ingat',
    'engt': 'ingat',
    'engat': 'ingat',
    'tska': 'tsaka',
    'bah': 'ba',
    'nba': 'na ba',
    'ung': 'yung',
    'yng': 'yung',
    'yny': 'yung',
    'un': 'yun',
    'yn': 'yun',
}.items())

# Typos, text speak and missing apostrophes (misspelled -> correct).
# Auto-correct applies these as whole-word replacements, so no canonical
# form may itself contain a key as a whole word.
ENGLISH_MISSPELLINGS = CorrectionMap({
    # Common typos
    'teh': 'the',
    'hte': 'the',
    'taht': 'that',
    'adn': 'and',
    'nad': 'and',
    'fo': 'of',
    'ot': 'to',
    'tot': 'to',
    'ti': 'it',
    'nto': 'not',
    'tno': 'not',
    'yuo': 'you',
    'yuor': 'your',
    'thier': 'their',
    'wiht': 'with',
    'whit': 'with',
    'fro': 'for',
    'frome': 'from',
    'jsut': 'just',
    'jstu': 'just',
    'nwo': 'now',
    'konw': 'know',
    'knwo': 'know',
    'hwo': 'how',
    'waht': 'what',
    'hwat': 'what',
    'wehn': 'when',
    'wehre': 'where',
    'whcih': 'which',
    'beacuse': 'because',
    'becuase': 'because',
    'becasue': 'because',
    'recieve': 'receive',
    'reciept': 'receipt',
    'seperate': 'separate',
    'occured': 'occurred',
    'occurence': 'occurrence',
    'definately': 'definitely',
    'definatly': 'definitely',
    'goverment': 'government',
    'enviroment': 'environment',
    'untill': 'until',
    'tommorrow': 'tomorrow',
    'tommorow': 'tomorrow',
    'tomarrow': 'tomorrow',
    'calender': 'calendar',
    'accomodate': 'accommodate',
    'acheive': 'achieve',
    'accross': 'across',
    'agressive': 'aggressive',
    'apparantly': 'apparently',
    'arguement': 'argument',
    'begining': 'beginning',
    'beleive': 'believe',
    'buisness': 'business',
    'catagory': 'category',
    'cemetary': 'cemetery',
    'changable': 'changeable',
    'collegue': 'colleague',
    'comming': 'coming',
    'commited': 'committed',
    'concious': 'conscious',
    'curiousity': 'curiosity',
    'embarass': 'embarrass',
    'existance': 'existence',
    'experiance': 'experience',
    'foriegn': 'foreign',
    'gauruntee': 'guarantee',
    'happend': 'happened',
    'harrass': 'harass',
    'immediatly': 'immediately',
    'independant': 'independent',
    'inteligent': 'intelligent',
    'intresting': 'interesting',
    'knowlege': 'knowledge',
    'liason': 'liaison',
    'manuever': 'maneuver',
    'millenium': 'millennium',
    'miniscule': 'minuscule',
    'mispell': 'misspell',
    'neccessary': 'necessary',
    'noticable': 'noticeable',
    'occassion': 'occasion',
    'perseverence': 'perseverance',
    'playwrite': 'playwright',
    'posession': 'possession',
    'potatos': 'potatoes',
    'preceed': 'precede',
    'privelege': 'privilege',
    'professer': 'professor',
    'publically': 'publicly',
    'quarentine': 'quarantine',
    'questionaire': 'questionnaire',
    'recomend': 'recommend',
    'reffered': 'referred',
    'relevent': 'relevant',
    'rythm': 'rhythm',
    'sieze': 'seize',
    'speach': 'speech',
    'supercede': 'supersede',
    'suprise': 'surprise',
    'tomatos': 'tomatoes',
    'truely': 'truly',
    'vaccuum': 'vacuum',
    'wierd': 'weird',
    'writting': 'writing',

    # Text speak common in Filipino-English writing
    'ur': 'your',
    'pls': 'please',
    'plz': 'please',
    'thru': 'through',
    'coz': 'because',
    'bcoz': 'because',
    'bcuz': 'because',
    'gud': 'good',
    'dat': 'that',
    'dis': 'this',
    'wat': 'what',
    'wer': 'were',
    'wen': 'when',
    'wud': 'would',
    'shud': 'should',
    'cud': 'could',
    'gonna': 'going to',
    'wanna': 'want to',
    'gotta': 'got to',
    'kinda': 'kind of',
    'dunno': "don't know",
    'prolly': 'probably',

    # Missing apostrophes
    'shouldnt': "shouldn't",
    'couldnt': "couldn't",
    'wouldnt': "wouldn't",
    'dont': "don't",
    'cant': "can't",
    'didnt': "didn't",
    'doesnt': "doesn't",
    'hasnt': "hasn't",
    'hadnt': "hadn't",
    'isnt': "isn't",
    'wasnt': "wasn't",
    'werent': "weren't",
    'arent': "aren't",
    'aint': "isn't",
    'im': "I'm",
    'ive': "I've",
    'youre': "you're",
    'youve': "you've",
    'youd': "you'd",
    'youll': "you'll",
    'theyre': "they're",
    'theyve': "they've",
    'theyd': "they'd",
    'theyll': "they'll",
    'weve': "we've",
    'hes': "he's",
    'shes': "she's",
    'thats': "that's",
    'whats': "what's",
    'whos': "who's",
    'heres': "here's",
    'theres': "there's",
    'wheres': "where's",
}.items())
