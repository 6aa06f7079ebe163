from gedcom_tree.loader import parse_gedcom
from gedcom_tree.registry import Event, Family, Header, Individual, interpret_tag
from gedcom_tree.registry.interpreters import interpret_family_tag, interpret_individual_tag


def test_individual_scalar_tags_overwrite():
    ind = Individual(id="@I1@")
    interpret_individual_tag(ind, "SEX", "M", "INDI")
    interpret_individual_tag(ind, "SEX", "F", "INDI")
    interpret_individual_tag(ind, "OCCU", "Miller", "INDI")
    interpret_individual_tag(ind, "NATI", "Dutch", "INDI")
    interpret_individual_tag(ind, "FAMC", "@F1@", "INDI")
    interpret_individual_tag(ind, "FAMC", "@F2@", "INDI")

    assert ind.sex == "F"
    assert ind.occupation == "Miller"
    assert ind.nationality == "Dutch"
    assert ind.family_child == "@F2@"


def test_notes_and_titles_append_in_order():
    text = (
        "0 @I1@ INDI\n"
        "1 NOTE first\n"
        "1 TITL Sir\n"
        "1 NOTE second\n"
        "1 TITL Lord\n"
        "1 NOTE third\n"
        "1 FAMS @F1@\n"
        "1 FAMS @F2@\n"
    )
    ind = parse_gedcom(text).individuals["@I1@"]

    assert ind.notes == ["first", "second", "third"]
    assert ind.titles == ["Sir", "Lord"]
    assert ind.family_spouse == ["@F1@", "@F2@"]


def test_birth_and_death_events_route_by_parent_tag():
    text = (
        "0 @I1@ INDI\n"
        "1 BIRT\n"
        "2 DATE 1 JAN 1900\n"
        "2 PLAC Oslo\n"
        "2 TYPE Home birth\n"
        "1 DEAT\n"
        "2 DATE 1980\n"
        "2 PLAC Bergen\n"
    )
    ind = parse_gedcom(text).individuals["@I1@"]

    assert ind.birth == Event(date="1 JAN 1900", place="Oslo", type="Home birth")
    assert ind.death == Event(date="1980", place="Bergen", type="")


def test_event_tag_resets_event():
    text = "0 @I1@ INDI\n1 BIRT\n2 DATE 1900\n1 BIRT\n2 PLAC Rome\n"
    ind = parse_gedcom(text).individuals["@I1@"]
    assert ind.birth == Event(date="", place="Rome", type="")


def test_orphaned_date_is_dropped():
    text = "0 @I1@ INDI\n1 DATE 1900\n1 RESI\n2 DATE 1910\n2 PLAC Nowhere\n"
    ind = parse_gedcom(text).individuals["@I1@"]

    assert ind.birth is None
    assert ind.death is None


def test_date_under_deat_without_event_is_dropped():
    ind = Individual(id="@I1@")
    interpret_individual_tag(ind, "DATE", "1900", "DEAT")
    assert ind.death is None


def test_unknown_tags_ignored():
    ind = Individual(id="@I1@")
    interpret_individual_tag(ind, "_CUSTOM", "x", "INDI")
    interpret_individual_tag(ind, "sex", "M", "INDI")
    assert ind == Individual(id="@I1@")


def test_family_tags():
    text = (
        "0 @F1@ FAM\n"
        "1 HUSB @I1@\n"
        "1 WIFE @I2@\n"
        "1 WIFE @I3@\n"
        "1 CHIL @I4@\n"
        "1 CHIL @I4@\n"
        "1 MARR\n"
        "2 DATE 1900\n"
        "2 PLAC Lyon\n"
        "2 TYPE Civil\n"
        "1 DIV\n"
        "2 DATE 1910\n"
    )
    fam = parse_gedcom(text).families["@F1@"]

    assert fam.husband == "@I1@"
    assert fam.wife == "@I3@"
    assert fam.children == ["@I4@", "@I4@"]
    assert fam.marriage == Event(date="1900", place="Lyon", type="")
    assert fam.divorce == Event(date="1910", place="", type="")


def test_family_date_without_marriage_is_dropped():
    fam = Family(id="@F1@")
    interpret_family_tag(fam, "DATE", "1900", "MARR")
    interpret_family_tag(fam, "PLAC", "Lyon", "FAM")
    assert fam.marriage is None
    assert fam.divorce is None


def test_husband_reference_accepted_regardless_of_sex():
    text = "0 @I1@ INDI\n1 SEX F\n0 @F1@ FAM\n1 HUSB @I1@\n"
    assert parse_gedcom(text).families["@F1@"].husband == "@I1@"


def test_interpret_tag_dispatches_on_record_kind():
    ind, fam, head = Individual(id="@I1@"), Family(id="@F1@"), Header()

    interpret_tag(ind, "NAME", "Ann /Lee/", "INDI")
    interpret_tag(fam, "CHIL", "@I1@", "FAM")
    interpret_tag(head, "CHAR", "UTF-8", "HEAD", level=1)

    assert ind.names[0].surname == "Lee"
    assert fam.children == ["@I1@"]
    assert head.get("CHAR") == "UTF-8"
