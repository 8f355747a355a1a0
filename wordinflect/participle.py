"""Present participles of English verbs and recognition of participle forms."""

from __future__ import annotations

__all__ = ["present_participle", "is_participle"]

_VOWELS = frozenset("aeiou")

# Multi-syllable verbs whose stressed final syllable doubles the last consonant.
_DOUBLE_CONSONANT_WORDS = frozenset({
    "admit", "begin", "commit", "compel", "confer", "control", "defer",
    "deter", "equip", "excel", "expel", "forget", "incur", "occur", "omit",
    "patrol", "permit", "prefer", "propel", "rebel", "recur", "refer",
    "regret", "repel", "submit", "transfer", "transmit", "upset",
})

_KNOWN_PARTICIPLES = frozenset({
    # Irregular past participles ending in -en
    "been", "beaten", "bitten", "blown", "broken", "chosen", "cloven",
    "driven", "eaten", "fallen", "forbidden", "foregone", "forgotten",
    "forgiven", "frozen", "given", "gone", "grown", "hewn", "hidden", "known",
    "laden", "lain", "mown", "proven", "ridden", "risen", "sawn", "seen",
    "sewn", "shaken", "shorn", "shown", "smitten", "sown", "spoken", "stolen",
    "strewn", "stridden", "striven", "sworn", "taken", "torn", "trodden",
    "woken", "worn", "woven", "written",
    # Irregular past participles ending in -t
    "bent", "built", "burnt", "crept", "dealt", "dreamt", "dwelt", "felt",
    "kept", "knelt", "leant", "leapt", "learnt", "left", "lent", "lit",
    "lost", "meant", "met", "slept", "smelt", "spelt", "spent", "spilt",
    "spoilt", "swept", "wept",
    # Irregular -ght endings
    "bought", "brought", "caught", "fought", "sought", "taught", "thought",
    # Irregular -nt endings
    "sent", "rent",
    # Other irregular forms
    "bound", "bled", "bred", "clung", "done", "dug", "fed", "fled", "flung",
    "found", "ground", "had", "heard", "held", "hung", "laid", "led", "made",
    "paid", "rung", "said", "sat", "shed", "shone", "shot", "shrunk", "slid",
    "slit", "slung", "sold", "sped", "spun", "spat", "sprung", "stood",
    "stuck", "stung", "stunk", "struck", "strung", "sung", "sunk", "swum",
    "swung", "told", "understood", "withdrawn", "won", "wound", "wrung",
    # Unchanged forms
    "abode", "beset", "bet", "bid", "burst", "come", "cost", "cut", "hit",
    "hurt", "let", "put", "quit", "read", "run", "set", "shut", "split",
    "wet", "spread", "thrust",
})

# Words ending in -ing that are base forms or nouns, not participles.
_ING_NON_PARTICIPLES = frozenset({
    "sing", "ring", "bring", "thing", "king", "wing", "spring", "string",
    "swing", "sting", "sling", "cling",
})

# Words ending in -ed that are not participles.
_ED_NON_PARTICIPLES = frozenset({
    "bed", "red", "shed", "wed", "sled", "ted", "ned", "fed",
})


def _is_vowel(ch: str) -> bool:
    return ch.lower() in _VOWELS


def _count_vowels(s: str) -> int:
    return sum(1 for ch in s if _is_vowel(ch))


def _match_suffix(word: str, suffix: str) -> str:
    """Upper-case ``suffix`` when ``word`` is written in capitals."""
    return suffix.upper() if word.isupper() else suffix


def _is_already_participle(lower: str) -> bool:
    """Catch forms like "running" (doubled consonant before -ing), but not "sing"."""
    if not lower.endswith("ing") or len(lower) < 5:
        return False
    before_ing, before_that = lower[-4], lower[-5]
    return before_ing == before_that and not _is_vowel(before_ing)


def _should_double_consonant(lower: str) -> bool:
    """Tell whether a consonant-vowel-consonant ending doubles its last letter."""
    n = len(lower)
    if n < 3:
        return False
    last = lower[-1]
    if last in "wxy" or _is_vowel(last):
        return False
    if not _is_vowel(lower[-2]):
        return False
    if _is_vowel(lower[-3]):
        return False
    if n == 3:
        return True
    if n == 4:
        return _count_vowels(lower) == 1
    return lower in _DOUBLE_CONSONANT_WORDS


def present_participle(verb: str) -> str:
    """Return the -ing form of a verb, e.g. "run" -> "running", "make" -> "making"."""
    if not verb:
        return ""
    lower = verb.lower()

    if _is_already_participle(lower):
        return verb
    if len(lower) == 1:
        return verb + _match_suffix(verb, "ing")
    if lower.endswith("ie"):
        return verb[:-2] + _match_suffix(verb, "ying")
    if lower.endswith(("ee", "ye", "oe", "nge")):
        return verb + _match_suffix(verb, "ing")
    if lower.endswith("c"):
        return verb + _match_suffix(verb, "king")
    if lower.endswith("e"):
        if _is_vowel(lower[-2]):
            return verb + _match_suffix(verb, "ing")
        if _count_vowels(lower[:-1]) == 0:
            # The final e is the only vowel, so it is not silent: "be" -> "being".
            return verb + _match_suffix(verb, "ing")
        return verb[:-1] + _match_suffix(verb, "ing")
    if _should_double_consonant(lower):
        return verb + _match_suffix(verb, lower[-1] + "ing")
    return verb + _match_suffix(verb, "ing")


def is_participle(word: str) -> bool:
    """Tell whether ``word`` looks like a present or past participle."""
    if not word:
        return False
    lower = word.lower()

    if lower in _KNOWN_PARTICIPLES:
        return True
    if lower.endswith("ing") and len(lower) >= 4:
        return lower not in _ING_NON_PARTICIPLES
    if lower.endswith("ed") and len(lower) >= 3:
        return lower not in _ED_NON_PARTICIPLES
    return False