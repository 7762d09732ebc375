"""
Response length estimation.

Predicts how many tokens a model will spend answering a prompt using an
ordered decision table. Each rule pairs a predicate with a handler; rules
are evaluated top to bottom and the first predicate that matches decides
the estimate. Later rules assume earlier ones have already been ruled out,
so the order below is part of the behavior:

1. simple_factual       - yes/no, "what is the capital of", small lists
2. code_line_count      - "write 50 lines of python"
3. sociopolitical_why   - why-question about a socio-political topic
4. sociopolitical_topic - any other socio-political prompt
5. creative_writing     - stories, fan fiction, genre requests
6. line_count           - "40 lines of text"
7. word_count           - "500 words", "a 300-word summary"
8. page_count           - "3 page essay"
9. tell_me_about        - "tell me about ..."
10. content_type        - lookup table of content kinds
11. numeric_word_count  - "5k words", "five thousand words"
12. list_generation     - "list ...", "10 ways to ..."
13. why_question        - any other why-question
14. fallback            - prompt-length based default with style modifiers

Every estimate is rounded up to an integer and is never below
MIN_RESPONSE_TOKENS.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Callable, Optional, Pattern, Tuple

from .classifiers import MatchMode, contains_phrase
from .content_types import (
    AMBIGUOUS_LANGUAGE_NAMES,
    CONTENT_CREATION_VERBS,
    CONTENT_TYPE_TOKENS,
    DEFAULT_TOKENS_PER_LINE,
    FUZZY_CONTENT_ALIASES,
    GENERIC_LINE_LANGUAGES,
    GENERIC_LINE_RATES,
    LENGTH_MULTIPLIERS,
    LIST_COUNT_NOUNS,
    OPINION_TERMS,
    REASONING_NUDGES,
    SOCIOPOLITICAL_TERMS,
    SPELLED_NUMBERS,
    STYLE_MULTIPLIERS,
    TOKENS_PER_LINE,
    WHY_TRIGGERS,
)
from .token_counter import TOKENS_PER_WORD, count_tokens

logger = logging.getLogger(__name__)

MIN_RESPONSE_TOKENS = 15
FALLBACK_MIN_TOKENS = 20

CODE_OVERHEAD = 1.2
CODE_TOKEN_CAP = 120000
GENERIC_LINE_TOKEN_CAP = 100000
WORDS_PER_PAGE = 500


def _terms_pattern(terms) -> Pattern:
    return re.compile(r"\b(?:" + "|".join(re.escape(term) for term in terms) + r")\b")


# --- simple factual queries ---

# Quantified list requests; group 1 is the quantity
_LIST_QUANTIFIERS = (
    re.compile(r"\b(?:name|list)\s+(\d+|an?|some|few)\s+\S"),
    re.compile(r"\b(?:(?:give|show)(?:\s+me)?|tell\s+me)\s+(\d+|some|a\s+few|few)\s+\S"),
)
_YES_NO_QUESTION = re.compile(
    r"^(?:is|are|was|were|do|does|did|can|could|will|would|should|has|have|had)\b.*\?$",
    re.DOTALL,
)
_CREATION_REQUEST = re.compile(r"\b(?:write|create|generate|compose|draft|produce)\b")
_FACTUAL_PATTERNS = (
    re.compile(
        r"^what\s+is\s+the\s+(?:name|capital|population|height|age|date|time|year|color|"
        r"distance|temperature|size|location)\s+of\b.*\?$",
        re.DOTALL,
    ),
    re.compile(r"^when\s+(?:was|is|did|will)\b.*\?$", re.DOTALL),
    re.compile(r"^where\s+is\b.*\?$", re.DOTALL),
    re.compile(r"^who\s+(?:is|was|were)\b.*\?$", re.DOTALL),
    re.compile(r"^how\s+(?:many|much|tall|old|long|far)\s+is\b.*\?$", re.DOTALL),
    re.compile(r"\bconvert\s+\d+(?:\.\d+)?\s+.*\bto\s+\S"),
    re.compile(r"\b(?:calculate|compute|solve)\s+\d+(?:\.\d+)?\s*[-+*/^]\s*\d+"),
    re.compile(r"^define\s+\w+"),
    re.compile(r"^what\s+does\s+\w+\s+mean\b"),
)

# --- code and line counts ---

_CODE_NOUN = r"(?:code|program|script|application|app)"
_LINES = r"\b(?P<lines>\d+)\s*-?\s*lines?"
_LANG = r"(?P<lang>[\w#+]+)"
_CODE_NOUN_RE = re.compile(r"\b" + _CODE_NOUN + r"s?\b")
_CODE_LINE_PATTERNS = (
    # "a 100-line python script"
    re.compile(_LINES + r"\s+" + _LANG + r"\s+" + _CODE_NOUN + r"\b"),
    # "50 lines of python code"
    re.compile(_LINES + r"\s+of\s+" + _LANG),
    # "50 lines of code in rust", "200 lines using go"
    re.compile(_LINES + r"\s+(?:(?:of\s+)?" + _CODE_NOUN + r"\s+)?(?:in|using|with)\s+" + _LANG),
    # "a javascript program that is 20 lines"
    re.compile(
        r"\b" + _LANG + r"\s+" + _CODE_NOUN
        + r"\s+(?:(?:that|which)\s+(?:is|has)\s+|of\s+|with\s+)?(?:about\s+)?" + _LINES
    ),
)
_GENERIC_LINE_COUNT = re.compile(
    r"\b(\d{2,})\s*-?\s*lines?\s+(?:of\s+)?(?:code|program|script|text|content)\b"
)

# --- topics ---

_SOCIOPOLITICAL = _terms_pattern(term for group in SOCIOPOLITICAL_TERMS for term in group)
_WHY_TRIGGER = _terms_pattern(WHY_TRIGGERS)
_OPINION = _terms_pattern(OPINION_TERMS)

_CREATIVE_PATTERNS = (
    re.compile(
        r"\b(?:write|create|generate|make)\s+(?:(?:a|an|some|the)\s+)?"
        r"(?:story|narrative|tale|fiction|novel|fanfic|fan\s*fic|fan\s*fiction|short\s*story)"
    ),
    re.compile(r"\bfan\s*fic(?:tion)?"),
    re.compile(r"\b(?:story|narrative|tale)\s+(?:about|with|featuring|of|where)\b"),
    re.compile(
        r"\bwrite\s+(?:(?:a|an|some|the)\s+)?(?:creepy|scary|funny|romantic|dramatic|epic|"
        r"fantasy|sci-fi|adventure|mystery|thriller|horror)\b"
    ),
)
_FAN_FICTION = re.compile(r"\bfan\s*fic")

# --- explicit lengths ---

_WORD_COUNT_PATTERNS = (
    re.compile(r"(?<![\d,.])(\d{2,})\s*-?\s*words?\b"),
    re.compile(r"\bword\s+(?:count|limit)\s+(?:of\s+)?(\d{2,})\b"),
)
_PAGE_COUNT = re.compile(
    r"\b(\d+)(?:\s+|\s*-\s*)pages?\s+"
    r"(?:essay|story|article|text|paper|document|response|writing)\b"
)
_TELL_ME_ABOUT = re.compile(r"\btell\s+(?:me|us)\s+(?:about|why|how)\s+.{3,}", re.DOTALL)

_THOUSANDS_SUFFIX = re.compile(r"\b(\d+)k\s*words?\b")
_COMMA_GROUPED = re.compile(r"\b(\d{1,3}(?:,\d{3})+)\s*words?\b")
_SPELLED_THOUSANDS = re.compile(
    r"\b(" + "|".join(SPELLED_NUMBERS) + r")\s+thousand\s+words?\b"
)
_A_THOUSAND = re.compile(r"\b(?:a|one)\s+thousand\s+words?\b")
_FEW_THOUSAND = re.compile(r"\b(?:few|couple(?:\s+of)?|several)\s+thousand\s+words?\b")

# --- lists and questions ---

_COUNTED_THINGS = re.compile(r"\b\d+\s+(?:things|ways|steps|tips)\b")
_LIST_COUNT = re.compile(r"\b(\d+)\s+(?:" + "|".join(LIST_COUNT_NOUNS) + r")\b")
_LEADING_WHY = re.compile(r"^why\s+")
_EMBEDDED_NUMBER = re.compile(r"\b(\d+)\b")


@lru_cache(maxsize=None)
def _language_pattern(language: str) -> Pattern:
    return re.compile(r"(?<![\w#+])" + re.escape(language) + r"(?![\w#+])")


def _plural_tolerant(content_type: str) -> str:
    # "story" also matches "stories", "essay" also matches "essays"
    if len(content_type) > 1 and content_type.endswith("y") and content_type[-2] not in "aeiou":
        return re.escape(content_type[:-1]) + r"(?:y|ies)"
    return re.escape(content_type) + r"(?:s|es)?"


@lru_cache(maxsize=None)
def _content_type_patterns(content_type: str) -> Tuple[Pattern, Pattern, Pattern]:
    phrase = _plural_tolerant(content_type)
    verb_context = re.compile(
        r"\b(?:write|create|generate|make)\s+(?:(?:an?|the)\s+)?" + phrase + r"\b"
    )
    topic_context = re.compile(r"\b" + phrase + r"\s+(?:about|on|for|regarding)\b")
    bare = re.compile(r"\b" + phrase + r"\b")
    return verb_context, topic_context, bare


def _ceil(value: float) -> int:
    # Rounding first keeps float noise such as 1800.0000000000002 from adding a token
    return int(math.ceil(round(value, 6)))


@dataclass(frozen=True)
class EstimationResult:
    """Estimated response length and the rule that produced it."""
    tokens: int
    rule: str


@dataclass(frozen=True)
class _PromptContext:
    text: str
    lower: str
    prompt_tokens: int
    mode: MatchMode

    def has(self, phrase: str) -> bool:
        return contains_phrase(self.lower, phrase, self.mode)

    def has_any(self, phrases) -> bool:
        return any(self.has(phrase) for phrase in phrases)


@dataclass(frozen=True)
class EstimationRule:
    """A named predicate/handler pair in the estimation cascade."""
    name: str
    matches: Callable[[_PromptContext], bool]
    estimate: Callable[[_PromptContext], float]


# --- 1. simple factual ---

def _factual_quantity(lower: str) -> Optional[int]:
    """A list quantifier's count, else the first integer in the prompt."""
    for pattern in _LIST_QUANTIFIERS:
        match = pattern.search(lower)
        if match and match.group(1).isdigit():
            return int(match.group(1))
    match = _EMBEDDED_NUMBER.search(lower)
    return int(match.group(1)) if match else None


def _is_simple_factual(ctx: _PromptContext) -> bool:
    if any(pattern.search(ctx.lower) for pattern in _LIST_QUANTIFIERS):
        return True
    if _YES_NO_QUESTION.search(ctx.lower) and not _CREATION_REQUEST.search(ctx.lower):
        return True
    return any(pattern.search(ctx.lower) for pattern in _FACTUAL_PATTERNS)


def _estimate_simple_factual(ctx: _PromptContext) -> float:
    quantity = _factual_quantity(ctx.lower)
    if quantity is not None:
        if quantity <= 10:
            return max(quantity * 10, 15)
        if quantity <= 100:
            return max(quantity * 5, 30)
    return max(ctx.prompt_tokens * 1.2, 20)


# --- 2. code line count ---

def _find_language(lower: str, candidates) -> Optional[str]:
    for language in candidates:
        if _language_pattern(language).search(lower):
            return language
    return None


def _resolve_language(captured: str, lower: str) -> Optional[str]:
    if captured in TOKENS_PER_LINE:
        return captured
    scannable = [name for name in TOKENS_PER_LINE if name not in AMBIGUOUS_LANGUAGE_NAMES]
    return _find_language(lower, scannable)


def _find_code_request(ctx: _PromptContext) -> Optional[Tuple[int, Optional[str]]]:
    """Return (line count, language) for an explicit code request, if any."""
    for pattern in _CODE_LINE_PATTERNS:
        match = pattern.search(ctx.lower)
        if not match:
            continue
        language = _resolve_language(match.group("lang"), ctx.lower)
        if language is None and not _CODE_NOUN_RE.search(ctx.lower):
            continue
        return int(match.group("lines")), language
    return None


def _estimate_code_lines(ctx: _PromptContext) -> float:
    lines, language = _find_code_request(ctx)
    rate = TOKENS_PER_LINE.get(language, DEFAULT_TOKENS_PER_LINE)
    estimate = min(lines * rate * CODE_OVERHEAD, CODE_TOKEN_CAP)
    logger.debug(
        "Code request: %d lines of %s at %d tokens/line", lines, language or "code", rate
    )
    return estimate


# --- 3/4. socio-political ---

def _is_sociopolitical_why(ctx: _PromptContext) -> bool:
    return bool(_WHY_TRIGGER.search(ctx.lower) and _SOCIOPOLITICAL.search(ctx.lower))


def _is_sociopolitical(ctx: _PromptContext) -> bool:
    return _SOCIOPOLITICAL.search(ctx.lower) is not None


def _estimate_sociopolitical_topic(ctx: _PromptContext) -> float:
    if _OPINION.search(ctx.lower):
        return max(180, ctx.prompt_tokens * 4.5)
    return max(150, ctx.prompt_tokens * 4)


# --- 5. creative writing ---

def _is_creative_writing(ctx: _PromptContext) -> bool:
    return any(pattern.search(ctx.lower) for pattern in _CREATIVE_PATTERNS)


def _estimate_creative_writing(ctx: _PromptContext) -> float:
    if _FAN_FICTION.search(ctx.lower):
        return max(1800, ctx.prompt_tokens * 8)
    if ctx.has_any(("short", "brief")):
        return max(700, ctx.prompt_tokens * 5)
    if ctx.has_any(("detailed", "elaborate", "long", "comprehensive")):
        return max(2500, ctx.prompt_tokens * 10)
    return max(500, ctx.prompt_tokens * 7)


# --- 6-9. explicit lengths ---

def _estimate_generic_lines(ctx: _PromptContext) -> float:
    lines = int(_GENERIC_LINE_COUNT.search(ctx.lower).group(1))
    language = _find_language(ctx.lower, GENERIC_LINE_LANGUAGES)
    rate = GENERIC_LINE_RATES.get(language, DEFAULT_TOKENS_PER_LINE)
    return min(lines * rate * CODE_OVERHEAD, GENERIC_LINE_TOKEN_CAP)


def _requested_word_count(lower: str) -> Optional[int]:
    for pattern in _WORD_COUNT_PATTERNS:
        match = pattern.search(lower)
        if match:
            return int(match.group(1))
    return None


def _estimate_page_count(ctx: _PromptContext) -> float:
    pages = int(_PAGE_COUNT.search(ctx.lower).group(1))
    return pages * WORDS_PER_PAGE * TOKENS_PER_WORD


# --- 10. content types ---

def _mentions_content_type(ctx: _PromptContext, content_type: str) -> bool:
    verb_context, topic_context, bare = _content_type_patterns(content_type)
    if verb_context.search(ctx.lower) or topic_context.search(ctx.lower):
        return True
    if ctx.mode == MatchMode.SUBSTRING:
        return content_type in ctx.lower
    return bare.search(ctx.lower) is not None


def _find_content_type(ctx: _PromptContext) -> Optional[str]:
    for alias, canonical in FUZZY_CONTENT_ALIASES.items():
        if canonical in CONTENT_TYPE_TOKENS and ctx.has(alias):
            return canonical
    for content_type in CONTENT_TYPE_TOKENS:
        if _mentions_content_type(ctx, content_type):
            return content_type
    return None


def _estimate_content_type(ctx: _PromptContext) -> float:
    content_type = _find_content_type(ctx)
    logger.debug("Content type detected: %s", content_type)
    return CONTENT_TYPE_TOKENS[content_type]


# --- 11. numeric word counts ---

def _numeric_word_count(lower: str) -> Optional[int]:
    match = _THOUSANDS_SUFFIX.search(lower)
    if match:
        return int(match.group(1)) * 1000
    match = _COMMA_GROUPED.search(lower)
    if match:
        return int(match.group(1).replace(",", ""))
    match = _SPELLED_THOUSANDS.search(lower)
    if match:
        return SPELLED_NUMBERS[match.group(1)] * 1000
    if _A_THOUSAND.search(lower):
        return 1000
    if _FEW_THOUSAND.search(lower):
        return 3000
    return None


# --- 12. modifiers ---

def _length_multiplier(ctx: _PromptContext) -> float:
    multiplier = 1.0
    for table in (LENGTH_MULTIPLIERS, STYLE_MULTIPLIERS):
        for keyword, factor in table:
            if ctx.has(keyword):
                multiplier *= factor
    return multiplier


def _reasoning_nudge(ctx: _PromptContext) -> float:
    nudge = 1.0
    for keywords, factor in REASONING_NUDGES:
        if ctx.has_any(keywords):
            nudge *= factor
    return nudge


# --- 13/14. lists and why ---

def _is_list_request(ctx: _PromptContext) -> bool:
    if ctx.mode == MatchMode.SUBSTRING:
        listed = "list" in ctx.lower
    else:
        listed = re.search(r"\blist(?:s|ing)?\b", ctx.lower) is not None
    return listed or _COUNTED_THINGS.search(ctx.lower) is not None


def _estimate_list(ctx: _PromptContext) -> float:
    match = _LIST_COUNT.search(ctx.lower)
    if match:
        return int(match.group(1)) * 50 + 200
    return 500


def _is_why_question(ctx: _PromptContext) -> bool:
    return bool(_LEADING_WHY.search(ctx.lower)) or " why " in ctx.lower


# --- 15. fallback ---

def _estimate_fallback(ctx: _PromptContext) -> float:
    if ctx.has_any(CONTENT_CREATION_VERBS):
        base = max(ctx.prompt_tokens * 3, 300)
    else:
        base = max(ctx.prompt_tokens * 1.5, 100)
    return max(base * _length_multiplier(ctx) * _reasoning_nudge(ctx), FALLBACK_MIN_TOKENS)


DEFAULT_RULES: Tuple[EstimationRule, ...] = (
    EstimationRule("simple_factual", _is_simple_factual, _estimate_simple_factual),
    EstimationRule(
        "code_line_count",
        lambda ctx: _find_code_request(ctx) is not None,
        _estimate_code_lines,
    ),
    EstimationRule(
        "sociopolitical_why",
        _is_sociopolitical_why,
        lambda ctx: max(200, ctx.prompt_tokens * 5),
    ),
    EstimationRule("sociopolitical_topic", _is_sociopolitical, _estimate_sociopolitical_topic),
    EstimationRule("creative_writing", _is_creative_writing, _estimate_creative_writing),
    EstimationRule(
        "line_count",
        lambda ctx: _GENERIC_LINE_COUNT.search(ctx.lower) is not None,
        _estimate_generic_lines,
    ),
    EstimationRule(
        "word_count",
        lambda ctx: _requested_word_count(ctx.lower) is not None,
        lambda ctx: _requested_word_count(ctx.lower) * TOKENS_PER_WORD,
    ),
    EstimationRule(
        "page_count",
        lambda ctx: _PAGE_COUNT.search(ctx.lower) is not None,
        _estimate_page_count,
    ),
    EstimationRule(
        "tell_me_about",
        lambda ctx: _TELL_ME_ABOUT.search(ctx.lower) is not None,
        lambda ctx: max(120, ctx.prompt_tokens * 3.5),
    ),
    EstimationRule(
        "content_type",
        lambda ctx: _find_content_type(ctx) is not None,
        _estimate_content_type,
    ),
    EstimationRule(
        "numeric_word_count",
        lambda ctx: _numeric_word_count(ctx.lower) is not None,
        lambda ctx: _numeric_word_count(ctx.lower) * TOKENS_PER_WORD,
    ),
    EstimationRule("list_generation", _is_list_request, _estimate_list),
    EstimationRule(
        "why_question",
        _is_why_question,
        lambda ctx: max(130, ctx.prompt_tokens * 3.5),
    ),
)

FALLBACK_RULE = "fallback"


@dataclass
class ResponseLengthEstimator:
    """
    Runs the estimation cascade.

    Attributes:
        match_mode: How keyword tables are matched against the prompt
        rules: Ordered rules; the fallback runs when none of them match
    """
    match_mode: MatchMode = MatchMode.WORD
    rules: Tuple[EstimationRule, ...] = field(default=DEFAULT_RULES)

    def explain(self, text: Optional[str], prompt_tokens: Optional[float] = None) -> EstimationResult:
        """
        Estimate the response length and report which rule decided it.

        Args:
            text: Raw prompt text; None is treated as empty
            prompt_tokens: Token count of the prompt. Counted with the
                heuristic token counter when omitted. Negative and
                fractional values are clamped to a non-negative integer.

        Returns:
            EstimationResult with tokens >= MIN_RESPONSE_TOKENS
        """
        text = text or ""
        if prompt_tokens is None:
            prompt_tokens = count_tokens(text)
        ctx = _PromptContext(
            text=text,
            lower=text.strip().lower(),
            prompt_tokens=max(0, int(prompt_tokens)),
            mode=self.match_mode,
        )

        for rule in self.rules:
            if rule.matches(ctx):
                return self._result(rule.name, rule.estimate(ctx))
        return self._result(FALLBACK_RULE, _estimate_fallback(ctx))

    def estimate(self, text: Optional[str], prompt_tokens: Optional[float] = None) -> int:
        """Estimate the response length in tokens."""
        return self.explain(text, prompt_tokens).tokens

    @staticmethod
    def _result(rule_name: str, raw_estimate: float) -> EstimationResult:
        tokens = max(_ceil(raw_estimate), MIN_RESPONSE_TOKENS)
        logger.debug("Estimator rule %s fired: %d response tokens", rule_name, tokens)
        return EstimationResult(tokens=tokens, rule=rule_name)


def estimate_response_tokens(
    text: Optional[str],
    prompt_tokens: Optional[float] = None,
    match_mode: MatchMode = MatchMode.WORD
) -> int:
    """Estimate the response length of a prompt with the default rule cascade."""
    return ResponseLengthEstimator(match_mode=match_mode).estimate(text, prompt_tokens)
