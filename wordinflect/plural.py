"""Plural forms of English nouns, and counted noun phrases built on them."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

__all__ = ["Engine", "plural", "no", "num", "get_num"]

_VOWELS = frozenset("aeiou")

_CHANGE_TO_VES = frozenset({
    "calf", "elf", "half", "hoof", "knife", "leaf", "life", "loaf", "scarf",
    "self", "sheaf", "shelf", "thief", "wharf", "wife", "wolf",
})

_O_TAKES_S = frozenset({
    "alto", "auto", "basso", "canto", "casino", "combo", "contralto", "disco",
    "dynamo", "embryo", "espresso", "euro", "fiasco", "ghetto", "inferno",
    "kilo", "limo", "maestro", "memo", "metro", "piano", "photo", "pimento",
    "polo", "poncho", "pro", "ratio", "rhino", "silo", "solo", "soprano",
    "stiletto", "studio", "taco", "tattoo", "tempo", "tornado", "torso",
    "tuxedo", "video", "virtuoso", "zero", "albino", "archipelago",
    "armadillo", "commando", "dodo", "flamingo", "grotto", "magneto",
    "manifesto", "mosquito", "motto", "otto", "placebo", "portfolio",
    "quarto", "stucco", "tobacco", "volcano",
})

_UNCHANGED = frozenset({
    # Animals
    "aircraft", "cod", "deer", "fish", "moose", "offspring", "pike", "salmon",
    "series", "sheep", "shrimp", "species", "squid", "swine", "trout", "tuna",
    # French loanwords
    "corps", "chassis", "rendezvous", "debris", "precis", "patois", "bourgeois",
    # Latin fourth declension
    "apparatus", "coitus",
    # Other
    "means", "gallows", "barracks", "headquarters", "crossroads", "innings",
    "news", "politics", "economics", "mathematics", "physics", "ethics",
    "scissors", "pants", "trousers", "clothes", "swiss",
    # Japanese loanwords
    "samurai", "sushi", "karate", "sake", "tofu", "miso", "wasabi", "tempura",
    "origami", "judo", "sumo", "anime", "manga", "karaoke",
})

# Unchanged in classical-herd mode, otherwise regular.
_HERD_ANIMALS = frozenset({
    "bison", "buffalo", "caribou", "elk", "grouse", "antelope", "wildebeest",
})

# Words ending in -man where "man" is not the word "man".
_MAN_EXCEPTIONS = frozenset({
    "german", "roman", "ottoman", "norman", "turkoman", "mussulman", "brahman",
    "human", "shaman", "talisman", "dolman", "dragoman", "caiman", "cayman",
    "ataman", "hetman", "leman", "saman", "atman", "walkman",
})

_CLASSICAL_PLURALS = {
    "formula": "formulae", "antenna": "antennae", "vertebra": "vertebrae",
    "alumna": "alumnae", "larva": "larvae", "pupa": "pupae",
    "nebula": "nebulae", "aurora": "aurorae", "alga": "algae",
    "amoeba": "amoebae", "minutia": "minutiae", "lacuna": "lacunae",
    "persona": "personae", "vita": "vitae", "cornea": "corneae",
    "retina": "retinae", "hernia": "herniae", "nausea": "nauseae",
    "arena": "arenae", "zona": "zonae", "lamina": "laminae", "nova": "novae",
    "supernova": "supernovae",
    "octopus": "octopodes", "platypus": "platypodes",
}

_DEFAULT_IRREGULAR_PLURALS = {
    "child": "children", "foot": "feet", "goose": "geese", "louse": "lice",
    "man": "men", "mouse": "mice", "ox": "oxen", "person": "people",
    "tooth": "teeth", "woman": "women", "die": "dice",
    "criterion": "criteria", "phenomenon": "phenomena",
    "analysis": "analyses", "basis": "bases", "crisis": "crises",
    "diagnosis": "diagnoses", "hypothesis": "hypotheses", "oasis": "oases",
    "parenthesis": "parentheses", "synopsis": "synopses", "thesis": "theses",
    "alumnus": "alumni", "cactus": "cacti", "focus": "foci", "fungus": "fungi",
    "nucleus": "nuclei", "radius": "radii", "stimulus": "stimuli",
    "syllabus": "syllabi", "bacterium": "bacteria", "curriculum": "curricula",
    "datum": "data", "medium": "media", "memorandum": "memoranda",
    "millennium": "millennia", "stadium": "stadia", "stratum": "strata",
    "appendix": "appendices", "index": "indices", "matrix": "matrices",
    "vertex": "vertices", "apex": "apices",
    # Latin neuter -um -> -a
    "addendum": "addenda", "erratum": "errata", "symposium": "symposia",
    "consortium": "consortia", "compendium": "compendia", "atrium": "atria",
    "forum": "fora", "auditorium": "auditoria", "gymnasium": "gymnasia",
    "emporium": "emporia", "cranium": "crania", "aquarium": "aquaria",
    "ovum": "ova", "spectrum": "spectra", "vacuum": "vacua",
    "referendum": "referenda", "moratorium": "moratoria",
    "crematorium": "crematoria", "sanatorium": "sanatoria",
    "planetarium": "planetaria", "honorarium": "honoraria", "podium": "podia",
    "encomium": "encomia", "epithelium": "epithelia", "cilium": "cilia",
    "flagellum": "flagella", "phylum": "phyla",
    # Greek neuter -on -> -a
    "automaton": "automata", "polyhedron": "polyhedra",
    "ganglion": "ganglia", "lexicon": "lexica",
    # Latin masculine -us -> -i
    "terminus": "termini", "colossus": "colossi", "emeritus": "emeriti",
    "narcissus": "narcissi", "rhombus": "rhombi", "gladius": "gladii",
    "calculus": "calculi", "tumulus": "tumuli", "cumulus": "cumuli",
    "nimbus": "nimbi", "stratus": "strati", "cirrus": "cirri", "locus": "loci",
    "genius": "genii", "incubus": "incubi", "succubus": "succubi",
    "abacus": "abaci", "crocus": "croci", "thesaurus": "thesauri",
    "papyrus": "papyri", "uterus": "uteri", "coccus": "cocci",
    "bacillus": "bacilli", "bronchus": "bronchi", "meniscus": "menisci",
    "esophagus": "esophagi", "sarcophagus": "sarcophagi",
    # Greek -is -> -es
    "axis": "axes", "ellipsis": "ellipses", "nemesis": "nemeses",
    "praxis": "praxes", "synthesis": "syntheses",
    "metamorphosis": "metamorphoses", "psychosis": "psychoses",
    "neurosis": "neuroses", "sclerosis": "scleroses",
    "thrombosis": "thromboses",
    # Latin -ex/-ix -> -ices
    "cortex": "cortices", "vortex": "vortices", "latex": "latices",
    "murex": "murices", "pontifex": "pontifices", "simplex": "simplices",
    "calyx": "calyces", "helix": "helices", "radix": "radices",
    # Latin -nx -> -nges
    "larynx": "larynges", "pharynx": "pharynges", "phalanx": "phalanges",
    # French -eau -> -eaux
    "bureau": "bureaux", "château": "châteaux", "chateau": "chateaux",
    "plateau": "plateaux", "tableau": "tableaux", "beau": "beaux",
    "gateau": "gateaux", "trousseau": "trousseaux",
    "portmanteau": "portmanteaux",
    # Hebrew
    "seraph": "seraphim", "cherub": "cherubim", "kibbutz": "kibbutzim",
    # Italian
    "graffito": "graffiti", "virtuoso": "virtuosi", "libretto": "libretti",
    "tempo": "tempi", "concerto": "concerti",
    # Compound -foot
    "bigfoot": "bigfeet", "underfoot": "underfeet", "forefoot": "forefeet",
    "hindfoot": "hindfeet", "hotfoot": "hotfeet", "clubfoot": "clubfeet",
    "flatfoot": "flatfeet", "tenderfoot": "tenderfeet",
    "blackfoot": "blackfeet", "barefoot": "barefeet",
    # Compound -tooth
    "eyetooth": "eyeteeth", "bucktooth": "buckteeth", "dogtooth": "dogteeth",
    "sabertooth": "saberteeth", "snaggletooth": "snaggleteeth",
    "houndstooth": "houndsteeth", "sawtooth": "sawteeth",
    # Compound -mouse / -louse
    "dormouse": "dormice", "titmouse": "titmice",
    "flittermouse": "flittermice", "woodlouse": "woodlice",
    "booklouse": "booklice",
    # Greek -ma -> -mata
    "stigma": "stigmata", "stoma": "stomata", "soma": "somata",
    "carcinoma": "carcinomata", "sarcoma": "sarcomata",
    "lymphoma": "lymphomata", "melanoma": "melanomata",
    "glaucoma": "glaucomata", "edema": "edemata", "anathema": "anathemata",
    # Anatomical Latin
    "femur": "femora", "humerus": "humeri", "sternum": "sterna",
    # Others
    "testis": "testes", "penis": "penes", "agendum": "agenda",
    "genus": "genera", "corpus": "corpora", "opus": "opera",
    "viscus": "viscera", "numen": "numina", "carmen": "carmina",
    "mythos": "mythoi", "money": "monies", "trilby": "trilbys",
    "atman": "atmas", "rom": "roma",
}


def _is_vowel(ch: str) -> bool:
    return ch.lower() in _VOWELS


def _match_case(word: str, replacement: str) -> str:
    """Give ``replacement`` the capitalisation of ``word``."""
    if word.isupper():
        return replacement.upper()
    if word[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def _match_suffix(word: str, suffix: str) -> str:
    """Upper-case ``suffix`` when ``word`` is written in capitals."""
    return suffix.upper() if word.isupper() else suffix


def _is_proper_name(word: str) -> bool:
    return word[:1].isupper() and not word.isupper()


def _is_proper_name_ending_in_s(word: str) -> bool:
    return _is_proper_name(word) and word.lower().endswith("s")


def _apply_suffix_rules(word: str, lower: str) -> str:
    if lower.endswith("man") and lower not in _MAN_EXCEPTIONS:
        return word[:-3] + _match_case(word[-3:], "men")

    if lower.endswith(("s", "sh", "ch", "x", "z")):
        return word + _match_suffix(word, "es")

    if lower.endswith("y") and len(lower) > 1 and not _is_vowel(lower[-2]):
        if _is_proper_name(word):
            return word + _match_suffix(word, "s")
        return word[:-1] + _match_suffix(word, "ies")

    if lower.endswith("fe"):
        if lower in _CHANGE_TO_VES:
            return word[:-2] + _match_suffix(word, "ves")
    elif lower.endswith("f") and not lower.endswith("ff"):
        if lower in _CHANGE_TO_VES:
            return word[:-1] + _match_suffix(word, "ves")

    if lower.endswith("o") and len(lower) > 1:
        if _is_vowel(lower[-2]) or lower in _O_TAKES_S:
            return word + _match_suffix(word, "s")
        return word + _match_suffix(word, "es")

    return word + _match_suffix(word, "s")


@dataclass
class Engine:
    """Inflection settings and state: classical-usage flags and a default count."""

    classical_names: bool = False
    classical_ancient: bool = False
    classical_persons: bool = False
    classical_herd: bool = False
    classical_zero: bool = False
    _irregular: dict = field(
        default_factory=lambda: dict(_DEFAULT_IRREGULAR_PLURALS), repr=False, compare=False
    )
    _default_num: int = field(default=0, repr=False, compare=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def plural(self, word: str) -> str:
        """Return the plural of an English noun, e.g. "child" -> "children"."""
        if not word:
            return ""
        lower = word.lower()

        if self.classical_names and _is_proper_name_ending_in_s(word):
            return word
        if self.classical_ancient and lower in _CLASSICAL_PLURALS:
            return _match_case(word, _CLASSICAL_PLURALS[lower])
        if self.classical_persons and lower == "person":
            return _match_case(word, "persons")

        with self._lock:
            irregular = self._irregular.get(lower)
        if irregular is not None:
            return _match_case(word, irregular)

        if lower in _UNCHANGED:
            return word
        if lower in _HERD_ANIMALS:
            if self.classical_herd:
                return word
            return _apply_suffix_rules(word, lower)
        if lower.endswith(("ese", "ois")):
            return word
        return _apply_suffix_rules(word, lower)

    def no(self, word: str, count: int) -> str:
        """Return a counted phrase: "no errors", "1 error", "2 errors"."""
        if count == 0:
            if self.classical_zero:
                return "no " + word
            return "no " + self.plural(word)
        if count in (1, -1):
            return f"{count} {word}"
        return f"{count} {self.plural(word)}"

    def num(self, n: int | None = None) -> int:
        """Store a positive default count and return it; zero, negatives or None clear it."""
        with self._lock:
            if n is None or n <= 0:
                self._default_num = 0
            else:
                self._default_num = n
            return self._default_num

    def get_num(self) -> int:
        """Return the stored default count, or 0 when none is set."""
        with self._lock:
            return self._default_num


_default_engine = Engine()


def plural(word: str) -> str:
    """Return the plural of ``word`` using the shared default engine."""
    return _default_engine.plural(word)


def no(word: str, count: int) -> str:
    """Return a counted phrase for ``word`` using the shared default engine."""
    return _default_engine.no(word, count)


def num(n: int | None = None) -> int:
    """Set or clear the default count of the shared engine."""
    return _default_engine.num(n)


def get_num() -> int:
    """Return the default count of the shared engine."""
    return _default_engine.get_num()