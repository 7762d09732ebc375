"""
Lookup tables for response length estimation.

Insertion order of CONTENT_TYPE_TOKENS is significant: when a prompt
mentions several content types, the entry listed first wins.
"""

from collections import OrderedDict
from typing import Dict, Tuple

# Typical response length in tokens for a requested piece of content
CONTENT_TYPE_TOKENS: "OrderedDict[str, int]" = OrderedDict([
    # Creative writing
    ("essay", 2000),
    ("story", 1500),
    ("poem", 300),
    ("novel", 3000),
    ("book", 3000),
    ("screenplay", 2000),
    ("script", 1500),
    ("fan fic", 1800),
    ("fanfic", 1800),
    ("fan fiction", 1800),
    ("fanfiction", 1800),

    # Technical and analytical
    ("analysis", 1000),
    ("report", 1200),
    ("review", 800),
    ("summary", 500),
    ("outline", 400),

    # Short-form
    ("tweet", 15),
    ("headline", 10),
    ("title", 10),
    ("caption", 20),
    ("slogan", 15),

    # Academic
    ("dissertation", 5000),
    ("thesis", 4000),
    ("research paper", 2500),
    ("term paper", 1800),
    ("assignment", 1200),
    ("lecture", 2000),
    ("case study", 1500),
    ("presentation", 1000),
    ("syllabus", 700),
    ("lesson plan", 800),
    ("study guide", 1200),
    ("literature review", 2000),
    ("annotated bibliography", 1000),
    ("concept map", 400),
    ("lab report", 1000),
    ("bibliography", 500),
    ("abstract", 200),
    ("conference paper", 1800),
    ("monograph", 3500),
    ("textbook chapter", 2500),

    # Extended creative writing
    ("short story", 1200),
    ("novella", 2500),
    ("flash fiction", 300),
    ("memoir", 2500),
    ("biography", 3000),
    ("autobiography", 3000),
    ("fairy tale", 1000),
    ("fable", 700),
    ("myth", 900),
    ("legend", 1000),
    ("epic", 2500),
    ("sonnet", 150),
    ("haiku", 30),
    ("limerick", 70),
    ("ballad", 400),
    ("song lyrics", 300),
    ("play", 2000),
    ("monologue", 500),
    ("dialogue", 700),
    ("character profile", 600),
    ("setting description", 500),
    ("plot outline", 800),

    # Business documents
    ("business plan", 3000),
    ("proposal", 1500),
    ("memo", 400),
    ("executive summary", 600),
    ("swot analysis", 800),
    ("market analysis", 1500),
    ("financial report", 1800),
    ("annual report", 2500),
    ("white paper", 2000),
    ("case brief", 1000),
    ("project plan", 1500),
    ("risk assessment", 1200),
    ("feasibility study", 1800),
    ("business letter", 300),
    ("invoice", 200),
    ("receipt", 150),
    ("contract", 1500),
    ("agreement", 1200),
    ("minutes", 800),
    ("agenda", 400),
    ("status report", 700),

    # Technical documentation
    ("technical manual", 2500),
    ("user guide", 1800),
    ("specification", 1200),
    ("api documentation", 1500),
    ("code documentation", 1000),
    ("troubleshooting guide", 1200),
    ("installation guide", 800),
    ("configuration guide", 1000),
    ("reference manual", 2000),
    ("system architecture", 1500),
    ("flowchart", 500),
    ("diagram", 400),
    ("schema", 600),
    ("protocol", 900),
    ("readme", 400),
    ("changelog", 500),
    ("release notes", 600),
    ("technical spec", 1400),
    ("algorithm", 700),
    ("pseudocode", 500),

    # Online and digital
    ("blog post", 800),
    ("article", 1000),
    ("newsletter", 800),
    ("email", 300),
    ("landing page", 500),
    ("about page", 400),
    ("faq", 600),
    ("product description", 250),
    ("social media post", 50),
    ("forum post", 300),
    ("comment", 100),
    ("review comment", 200),
    ("listicle", 1000),
    ("how-to guide", 1200),
    ("tutorial", 1500),
    ("infographic text", 400),
    ("quiz", 600),
    ("poll", 200),
    ("survey", 800),
    ("podcast script", 1500),
    ("webinar script", 1800),

    # Personal communication
    ("cover letter", 400),
    ("resume", 500),
    ("cv", 700),
    ("personal statement", 800),
    ("recommendation letter", 500),
    ("reference letter", 500),
    ("thank you note", 150),
    ("invitation", 200),
    ("condolence letter", 300),
    ("complaint letter", 400),
    ("apology", 250),
    ("congratulatory message", 200),
    ("greeting card", 100),
    ("diary entry", 500),
    ("journal entry", 600),

    # Media and entertainment
    ("movie review", 800),
    ("book review", 700),
    ("music review", 600),
    ("game review", 900),
    ("film analysis", 1200),
    ("movie synopsis", 700),
    ("show notes", 500),
    ("interview questions", 600),
    ("interview transcript", 1800),
    ("podcast transcript", 2000),
    ("speech", 1200),
    ("toast", 200),
    ("eulogy", 500),
    ("roast", 600),
    ("comedy routine", 900),
    ("storyboard", 700),
    ("game design document", 2000),
    ("character sheet", 500),

    # Legal
    ("legal brief", 2000),
    ("affidavit", 800),
    ("deposition", 1500),
    ("will", 600),
    ("trust", 1000),
    ("patent application", 2000),
    ("trademark application", 1500),
    ("license agreement", 1200),
    ("privacy policy", 1000),
    ("terms of service", 1500),
    ("disclaimer", 300),
    ("statement of work", 1000),
    ("cease and desist", 500),
    ("legal opinion", 1200),
    ("court filing", 1800),
    ("motion", 1000),

    # Marketing
    ("press release", 500),
    ("brochure", 600),
    ("flyer", 300),
    ("pamphlet", 400),
    ("catalog", 1500),
    ("advertisement", 200),
    ("marketing email", 400),
    ("campaign proposal", 1200),
    ("value proposition", 300),
    ("elevator pitch", 150),
    ("tagline", 10),
    ("mission statement", 200),
    ("vision statement", 200),
    ("brand story", 700),
    ("promotional copy", 500),
    ("sales letter", 800),
    ("case testimonial", 400),

    # Educational
    ("worksheet", 600),
    ("quiz questions", 500),
    ("test", 800),
    ("exam", 1000),
    ("answer key", 600),
    ("rubric", 400),
    ("curriculum", 1500),
    ("glossary", 800),
    ("definition list", 500),
    ("study notes", 1000),
    ("flashcards", 400),
    ("cheat sheet", 300),
    ("formula sheet", 200),
    ("timeline", 600),
    ("historical account", 1200),

    # Scientific
    ("scientific paper", 2500),
    ("experiment protocol", 1000),
    ("hypothesis", 200),
    ("methodology", 800),
    ("data analysis", 1000),
    ("statistical report", 1200),
    ("findings summary", 700),
    ("research proposal", 1800),
    ("grant application", 2000),
    ("patent description", 1500),
    ("clinical trial design", 1800),
    ("medical history", 1000),
    ("diagnostic report", 800),
    ("autopsy report", 1200),
    ("drug information", 900),

    # Miscellaneous
    ("recipe", 400),
    ("travel itinerary", 600),
    ("packing list", 300),
    ("checklist", 400),
    ("instructions", 700),
    ("manual", 1500),
    ("guidebook", 2000),
    ("handbook", 1800),
    ("dictionary entry", 150),
    ("encyclopedia entry", 800),
    ("rule book", 1200),
    ("transcript", 1500),
    ("translation", 1000),
    ("paraphrase", 800),
    ("critique", 1000),
    ("evaluation", 900),
    ("assessment", 800),
    ("testimonial", 300),
    ("anthology", 3000),
    ("collection", 2500),
    ("compilation", 2000),
    ("catalog entry", 250),
    ("menu", 300),
    ("itinerary", 500),
    ("schedule", 400),
    ("program", 500),
    ("bulletin", 600),
    ("leaflet", 400),
    ("manifesto", 1000),
    ("proclamation", 700),
    ("decree", 500),
    ("resolution", 600),
    ("policy", 900),
    ("regulation", 1000),
    ("statute", 1200),
    ("ordinance", 1000),
    ("code of conduct", 800),
    ("user agreement", 1200),
    ("subscription terms", 900),
    ("rental agreement", 800),
    ("lease", 1000),
    ("deed", 700),
    ("certificate", 200),
    ("diploma", 150),
    ("credential", 200),
    ("badge description", 150),
    ("achievement", 300),
    ("award nomination", 500),
    ("obituary", 400),
    ("bulletin board post", 200),
    ("classified ad", 100),
    ("job description", 500),
    ("job posting", 600),
    ("application form", 400),
    ("feedback form", 300),
    ("evaluation form", 500),
    ("survey questions", 700),
    ("questionnaire", 800),
    ("census form", 600),
    ("demographic report", 900),
    ("weather report", 300),
    ("traffic report", 250),
    ("stock analysis", 1000),
    ("trend report", 1200),
    ("forecast", 800),
    ("prediction", 500),
    ("horoscope", 300),
    ("fortune", 100),
    ("riddle", 150),
    ("puzzle", 200),
    ("crossword clue", 50),
    ("sudoku hint", 100),
    ("game rules", 700),
    ("formula description", 400),
    ("theorem explanation", 500),
    ("proof", 800),
    ("axiom", 150),
    ("postulate", 300),
    ("definition", 200),
    ("debate script", 1500),
    ("argument", 800),
    ("rebuttal", 600),
    ("counterargument", 700),
    ("persuasive essay", 1800),
    ("op-ed", 1000),
    ("editorial", 900),
    ("column", 800),
    ("advice column", 700),
    ("ask me anything", 1500),
    ("confession", 500),
    ("secret", 200),
    ("gossip", 300),
    ("rumor", 250),
    ("news bulletin", 400),
    ("breaking news", 300),
    ("weather alert", 200),
    ("emergency notice", 300),
    ("recall notice", 400),
    ("public service announcement", 500),
    ("safety instruction", 600),
    ("warning label", 150),
    ("nutrition facts", 200),
    ("ingredient list", 300),
    ("allergen information", 200),
    ("food label", 150),
    ("menu description", 300),
    ("cocktail recipe", 250),
    ("wine description", 200),
    ("beer review", 350),
    ("tasting notes", 300),
    ("product review", 700),
    ("user review", 400),
    ("critical review", 900),
    ("peer review", 1000),
])

# Informal synonyms checked before the table, mapped to a canonical entry
FUZZY_CONTENT_ALIASES: "OrderedDict[str, str]" = OrderedDict([
    ("fic", "fanfiction"),
    ("fiction", "story"),
    ("fictional", "story"),
    ("narrative", "story"),
    ("fable", "story"),
    ("prose", "story"),
])

# Average tokens per line of generated code
TOKENS_PER_LINE: Dict[str, int] = {
    "python": 30,
    "javascript": 35,
    "typescript": 40,
    "java": 45,
    "c#": 40,
    "cpp": 35,
    "c++": 35,
    "ruby": 25,
    "go": 30,
    "rust": 40,
    "swift": 35,
    "kotlin": 35,
    "php": 40,
    "html": 25,
    "css": 20,
    "sql": 25,
    "r": 25,
    "bash": 20,
    "powershell": 30,
}
DEFAULT_TOKENS_PER_LINE = 35

# Language names too ambiguous to find by scanning free text
AMBIGUOUS_LANGUAGE_NAMES = frozenset({"r", "go"})

# Languages checked, in order, for generic "N lines of ..." requests
GENERIC_LINE_LANGUAGES: Tuple[str, ...] = (
    "python", "javascript", "java", "c#", "c++", "ruby", "php", "go", "swift", "rust",
)
GENERIC_LINE_RATES: Dict[str, int] = {
    "java": 45,
    "c#": 45,
    "python": 30,
    "ruby": 30,
}

# Socio-political topic vocabulary, one group per policy area
SOCIOPOLITICAL_TERMS: Tuple[Tuple[str, ...], ...] = (
    ("government", "congress", "senate", "parliament", "democracy", "republic",
     "dictatorship", "monarchy"),
    ("healthcare", "universal healthcare", "medicare", "medicaid", "social security",
     "welfare", "tax", "taxation"),
    ("abortion", "gun control", "immigration", "racism", "inequality", "discrimination",
     "gender", "sexuality"),
    ("capitalism", "socialism", "communism", "economy", "wealth", "poverty", "class",
     "income"),
    ("foreign policy", "diplomacy", "war", "conflict", "treaty", "international", "global"),
    ("rights", "freedom", "liberty", "constitution", "amendment", "law", "regulation",
     "justice"),
    ("democrat", "republican", "liberal", "conservative", "progressive", "left wing",
     "right wing", "centrist"),
)
OPINION_TERMS: Tuple[str, ...] = (
    "think", "opinion", "view", "stance", "position", "perspective", "debate", "controversy",
)
WHY_TRIGGERS: Tuple[str, ...] = ("why", "reason", "explain why", "tell me why")

# Requested length, applied cumulatively when no structural rule matched
LENGTH_MULTIPLIERS: Tuple[Tuple[str, float], ...] = (
    ("detailed", 1.5),
    ("comprehensive", 2.0),
    ("thorough", 1.8),
    ("in-depth", 1.7),
    ("elaborate", 1.6),
    ("extensive", 1.9),
    ("long", 1.5),
    ("lengthy", 1.6),
    ("exhaustive", 2.0),
    ("complete", 1.5),
    ("brief", 0.7),
    ("concise", 0.6),
    ("short", 0.5),
    ("quick", 0.5),
    ("summary", 0.6),
)

# Writing register; length words live in LENGTH_MULTIPLIERS only
STYLE_MULTIPLIERS: Tuple[Tuple[str, float], ...] = (
    ("shakespeare", 1.5),
    ("shakespearean", 1.5),
    ("victorian", 1.4),
    ("academic", 1.3),
    ("technical", 1.2),
    ("terse", 0.5),
)

# Extra reasoning effort implied by the request; any keyword in a group applies it once
REASONING_NUDGES: Tuple[Tuple[Tuple[str, ...], float], ...] = (
    (("explain", "why"), 1.3),
    (("detail", "details", "detailed", "thorough"), 1.4),
    (("compare", "contrast"), 1.5),
    (("analyze", "analyse", "evaluate"), 1.6),
)

CONTENT_CREATION_VERBS: Tuple[str, ...] = (
    "write", "create", "generate", "produce", "compose", "author", "draft", "make",
)

LIST_COUNT_NOUNS: Tuple[str, ...] = (
    "things", "ways", "steps", "tips", "items", "examples", "reasons", "factors", "methods",
)

SPELLED_NUMBERS: Dict[str, int] = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
}
