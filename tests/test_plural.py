import pytest

from wordinflect.plural import Engine, get_num, no, num, plural


@pytest.fixture
def reset_num():
    num(0)
    yield
    num()


@pytest.mark.parametrize(
    "word, expected",
    [
        ("", ""),
        ("cat", "cats"), ("dog", "dogs"), ("book", "books"),
        ("bus", "buses"), ("class", "classes"), ("bush", "bushes"),
        ("church", "churches"), ("box", "boxes"), ("buzz", "buzzes"),
        ("city", "cities"), ("baby", "babies"), ("fly", "flies"),
        ("boy", "boys"), ("day", "days"), ("key", "keys"),
        ("knife", "knives"), ("wife", "wives"), ("leaf", "leaves"), ("wolf", "wolves"),
        ("roof", "roofs"), ("chief", "chiefs"),
        ("hero", "heroes"), ("potato", "potatoes"), ("tomato", "tomatoes"), ("echo", "echoes"),
        ("radio", "radios"), ("studio", "studios"), ("zoo", "zoos"),
        ("piano", "pianos"), ("photo", "photos"),
        ("child", "children"), ("foot", "feet"), ("tooth", "teeth"), ("mouse", "mice"),
        ("woman", "women"), ("man", "men"), ("person", "people"), ("ox", "oxen"),
        ("analysis", "analyses"), ("crisis", "crises"), ("thesis", "theses"),
        ("cactus", "cacti"), ("fungus", "fungi"), ("nucleus", "nuclei"),
        ("bacterium", "bacteria"), ("datum", "data"), ("medium", "media"),
        ("appendix", "appendices"), ("index", "indices"),
        ("sheep", "sheep"), ("deer", "deer"), ("fish", "fish"),
        ("species", "species"), ("series", "series"), ("aircraft", "aircraft"),
        ("fireman", "firemen"), ("policeman", "policemen"), ("spokesman", "spokesmen"),
        ("German", "Germans"), ("Roman", "Romans"), ("Ottoman", "Ottomans"),
        ("Norman", "Normans"), ("shaman", "shamans"), ("talisman", "talismans"),
        ("human", "humans"),
        ("addendum", "addenda"), ("erratum", "errata"), ("symposium", "symposia"),
        ("atrium", "atria"),
        ("automaton", "automata"), ("polyhedron", "polyhedra"),
        ("seraph", "seraphim"), ("cherub", "cherubim"), ("kibbutz", "kibbutzim"),
        ("graffito", "graffiti"), ("virtuoso", "virtuosi"), ("libretto", "libretti"),
        ("hoof", "hooves"), ("scarf", "scarves"), ("wharf", "wharves"),
        ("axis", "axes"), ("ellipsis", "ellipses"), ("nemesis", "nemeses"),
        ("synthesis", "syntheses"),
        ("calculus", "calculi"), ("locus", "loci"), ("bacillus", "bacilli"),
        ("cortex", "cortices"), ("vortex", "vortices"), ("helix", "helices"),
        ("bureau", "bureaux"), ("plateau", "plateaux"), ("chateau", "chateaux"),
        ("corps", "corps"), ("chassis", "chassis"), ("means", "means"),
        ("gallows", "gallows"), ("barracks", "barracks"), ("headquarters", "headquarters"),
        ("bigfoot", "bigfeet"), ("clubfoot", "clubfeet"),
        ("eyetooth", "eyeteeth"), ("sabertooth", "saberteeth"),
        ("Walkman", "Walkmans"), ("leman", "lemans"),
        ("Chinese", "Chinese"), ("Japanese", "Japanese"), ("Portuguese", "Portuguese"),
        ("CAT", "CATS"), ("Cat", "Cats"), ("Child", "Children"), ("CHILD", "CHILDREN"),
    ],
)
def test_plural(word, expected):
    assert plural(word) == expected


def test_proper_name_ending_in_y_adds_s():
    assert plural("Mary") == "Marys"


def test_classical_ancient():
    assert Engine(classical_ancient=True).plural("formula") == "formulae"
    assert Engine().plural("formula") == "formulas"


def test_classical_persons():
    assert Engine(classical_persons=True).plural("person") == "persons"
    assert Engine(classical_persons=True).plural("Person") == "Persons"


def test_classical_herd():
    assert Engine(classical_herd=True).plural("bison") == "bison"
    assert Engine().plural("bison") == "bisons"


def test_classical_names():
    assert Engine(classical_names=True).plural("Jones") == "Jones"
    assert Engine().plural("Jones") == "Joneses"


@pytest.mark.parametrize(
    "word, count, expected",
    [
        ("error", 0, "no errors"), ("cat", 0, "no cats"), ("child", 0, "no children"),
        ("mouse", 0, "no mice"), ("sheep", 0, "no sheep"), ("box", 0, "no boxes"),
        ("error", 1, "1 error"), ("cat", 1, "1 cat"), ("child", 1, "1 child"),
        ("mouse", 1, "1 mouse"), ("sheep", 1, "1 sheep"), ("box", 1, "1 box"),
        ("error", 2, "2 errors"), ("cat", 5, "5 cats"), ("child", 3, "3 children"),
        ("mouse", 10, "10 mice"), ("sheep", 100, "100 sheep"), ("box", 20, "20 boxes"),
        ("error", 1000, "1000 errors"), ("item", 1000000, "1000000 items"),
        ("error", -1, "-1 error"), ("error", -2, "-2 errors"), ("cat", -5, "-5 cats"),
        ("", 0, "no "), ("", 1, "1 "),
        ("Error", 0, "no Errors"), ("ERROR", 0, "no ERRORS"), ("Child", 2, "2 Children"),
    ],
)
def test_no(word, count, expected):
    assert no(word, count) == expected


def test_no_classical_zero():
    engine = Engine(classical_zero=True)
    assert engine.no("error", 0) == "no error"
    assert engine.no("child", 0) == "no child"
    assert engine.no("child", 3) == "3 children"


@pytest.mark.parametrize(
    "args, want_return, want_num",
    [
        ((5,), 5, 5),
        ((1,), 1, 1),
        ((100,), 100, 100),
        ((999999,), 999999, 999999),
        ((0,), 0, 0),
        ((), 0, 0),
        ((-5,), 0, 0),
        ((-1,), 0, 0),
    ],
)
def test_num(reset_num, args, want_return, want_num):
    assert num(*args) == want_return
    assert get_num() == want_num


def test_get_num_sequences(reset_num):
    assert get_num() == 0
    num(5)
    assert get_num() == 5
    num(10)
    assert get_num() == 10
    num(5)
    num(0)
    assert get_num() == 0
    num(5)
    num()
    assert get_num() == 0
    num(1)
    num(2)
    num(3)
    assert get_num() == 3


def test_num_workflow(reset_num):
    assert get_num() == 0
    assert num(5) == 5
    assert get_num() == 5
    assert num(10) == 10
    assert get_num() == 10
    assert num(0) == 0
    assert get_num() == 0
    num(7)
    assert num() == 0
    assert get_num() == 0


def test_engine_num_is_independent(reset_num):
    engine = Engine()
    assert engine.num(4) == 4
    assert engine.get_num() == 4
    assert get_num() == 0