from aleph3.helptexts import HelpEntry, get_help_entries

KNOWN_CATEGORIES = {
    "Trigonometric",
    "Arithmetic",
    "Exponential/Logarithmic",
    "Hyperbolic",
    "Other",
    "Logical",
    "String",
    "List",
    "Numeric",
    "Constants",
}


def by_name(name):
    return [entry for entry in get_help_entries() if entry.name == name]


def test_first_entry_is_sine():
    first = get_help_entries()[0]
    assert first == HelpEntry("Sin", "Sin[x]: Sine of x (x in radians)", "Trigonometric")


def test_every_description_starts_with_its_name():
    assert all(e.description.startswith(e.name) for e in get_help_entries())


def test_categories_are_known():
    assert {e.category for e in get_help_entries()} == KNOWN_CATEGORIES


def test_overloaded_names_have_two_entries():
    assert len(by_name("Log")) == 2
    assert len(by_name("ArcTan")) == 2
    assert {e.category for e in by_name("ArcTan")} == {"Trigonometric"}


def test_constants():
    names = [e.name for e in get_help_entries() if e.category == "Constants"]
    assert names == ["Pi", "E", "Degree"]
    assert by_name("Degree")[0].description == "Degree: 1 degree = Pi/180 radians"


def test_string_functions_present():
    names = {e.name for e in get_help_entries() if e.category == "String"}
    assert names == {"StringJoin", "StringLength", "StringReplace", "StringTake"}


def test_entries_are_stable():
    first = list(get_help_entries())
    second = list(get_help_entries())
    assert len(first) == 41
    assert first == second
    assert first[-1] == HelpEntry("Degree", "Degree: 1 degree = Pi/180 radians", "Constants")