"""Bilingual pattern library for decision extraction.

Patterns are data: a table of language → group → ordered patterns. Every
pattern has exactly one capturing group holding the extracted phrase.
Supporting a new language means adding entries here, not new branches in
the extractor.
"""

from __future__ import annotations

import re

DECISION = "decision"
RATIONALE = "rationale"
ALTERNATIVE = "alternative"
TRADEOFF = "tradeoff"

PATTERN_GROUPS = (DECISION, RATIONALE, ALTERNATIVE, TRADEOFF)

DEFAULT_LANGUAGE = "en"

_I = re.IGNORECASE

PATTERNS: dict[str, dict[str, list[re.Pattern[str]]]] = {
    "en": {
        DECISION: [
            re.compile(
                r"(?:decided|chose|selected|picked|went with|using|implemented|opted for|settled on)\s+(.+?)(?:\.|$)",
                _I,
            ),
            re.compile(r"(?:we(?:'ll| will)?|I(?:'ll| will)?)\s+(?:use|go with|implement|choose)\s+(.+?)(?:\.|$)", _I),
            re.compile(r"(?:the (?:best|right|better) (?:choice|option|approach) is)\s+(.+?)(?:\.|$)", _I),
            re.compile(r"(?:let's|we should|I recommend)\s+(?:use|go with|implement)\s+(.+?)(?:\.|$)", _I),
        ],
        RATIONALE: [
            re.compile(r"because\s+(.+?)(?:\.|$)", _I),
            re.compile(r"since\s+(.+?)(?:\.|$)", _I),
            re.compile(r"(?:the reason|rationale)(?:\s+is)?:?\s*(.+?)(?:\.|$)", _I),
            re.compile(r"due to\s+(.+?)(?:\.|$)", _I),
            re.compile(r"as\s+(.+?)(?:\.|$)", _I),
            re.compile(r"(?:this|it) (?:allows?|enables?|provides?|offers?)\s+(.+?)(?:\.|$)", _I),
        ],
        ALTERNATIVE: [
            re.compile(r"instead of\s+(.+?)(?:\.|,|$)", _I),
            re.compile(r"rather than\s+(.+?)(?:\.|,|$)", _I),
            re.compile(r"over\s+(.+?)(?:\.|,|but|$)", _I),
            re.compile(r"(?:not|didn't choose|avoided)\s+(.+?)(?:\.|,|$)", _I),
            re.compile(r"compared to\s+(.+?)(?:\.|,|$)", _I),
        ],
        TRADEOFF: [
            re.compile(r"(?:trade-?off|downside|drawback|con)(?:\s+is)?:?\s*(.+?)(?:\.|$)", _I),
            re.compile(r"(?:but|however|although)\s+(.+?)(?:\.|$)", _I),
            re.compile(r"(?:at the cost of|sacrifice)\s+(.+?)(?:\.|$)", _I),
        ],
    },
    "ko": {
        DECISION: [
            re.compile(r"(.+?)(?:을|를|으로|로)\s*(?:선택|결정|사용|채택|적용)(?:했|하기로|할)", _I),
            re.compile(r"(.+?)(?:이|가)\s*(?:더 낫|적합|좋|맞)", _I),
            re.compile(r"(?:결정|선택):\s*(.+?)(?:\.|$)", _I),
            re.compile(r"(.+?)(?:을|를)\s*(?:쓰기로|쓰겠)", _I),
        ],
        RATIONALE: [
            re.compile(r"(?:왜냐하면|이유는?|때문에)\s*(.+?)(?:\.|$)", _I),
            re.compile(r"(.+?)(?:이기 때문|라서|니까)", _I),
            re.compile(r"(?:장점|이점)(?:은|이)?\s*(.+?)(?:\.|$)", _I),
        ],
        ALTERNATIVE: [
            re.compile(r"(.+?)(?:대신|말고)", _I),
            re.compile(r"(.+?)(?:보다|보단)\s*(?:낫|좋|적합)", _I),
            re.compile(r"(.+?)(?:은|는)\s*(?:안|않)", _I),
        ],
        TRADEOFF: [
            re.compile(r"(?:단점|트레이드오프|대가)(?:은|는|이)?\s*(.+?)(?:\.|$)", _I),
            re.compile(r"(?:하지만|그러나|다만)\s*(.+?)(?:\.|$)", _I),
        ],
    },
}

# Category keywords, checked as lowercase substrings in this category order
CATEGORY_KEYWORDS: dict[str, dict[str, list[str]]] = {
    "architecture": {
        "en": [
            "architecture", "structure", "layer", "module", "component",
            "system", "design", "microservice", "monolith", "serverless",
        ],
        "ko": ["아키텍처", "구조", "레이어", "모듈", "컴포넌트", "시스템", "설계", "마이크로서비스"],
    },
    "implementation": {
        "en": [
            "implement", "code", "function", "method", "algorithm",
            "logic", "class", "interface", "type",
        ],
        "ko": ["구현", "코드", "함수", "메서드", "알고리즘", "로직", "클래스", "인터페이스", "타입"],
    },
    "library": {
        "en": [
            "library", "package", "dependency", "framework", "sdk",
            "api", "npm", "pip", "cargo", "gem",
        ],
        "ko": ["라이브러리", "패키지", "의존성", "프레임워크", "라이브러리 선택"],
    },
    "pattern": {
        "en": [
            "pattern", "strategy", "factory", "singleton", "observer",
            "mvc", "mvvm", "repository", "decorator", "adapter",
        ],
        "ko": ["패턴", "전략", "팩토리", "싱글톤", "옵저버", "디자인패턴"],
    },
}


def get_patterns(language: str, group: str) -> list[re.Pattern[str]]:
    """Return the ordered patterns of a group, falling back to English."""
    table = PATTERNS.get(language) or PATTERNS[DEFAULT_LANGUAGE]
    return table[group]


def match_patterns(text: str, patterns: list[re.Pattern[str]]) -> list[str]:
    """Collect the first capture of each pattern, stripped and deduplicated in order."""
    results: list[str] = []
    for pattern in patterns:
        match = pattern.search(text)
        if not match or not match.group(1):
            continue
        phrase = match.group(1).strip()
        if phrase and phrase not in results:
            results.append(phrase)
    return results


def infer_category(text: str, language: str) -> str:
    """Return the first category with a keyword contained in the text, else "other"."""
    lower_text = text.lower()
    for category, keywords in CATEGORY_KEYWORDS.items():
        lang_keywords = keywords.get(language) or keywords[DEFAULT_LANGUAGE]
        if any(keyword.lower() in lower_text for keyword in lang_keywords):
            return category
    return "other"
