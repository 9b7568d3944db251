# tests/test_extra.py

from sic2lp.lastpass.extra import build_extra


def test_site_extra_excludes_extracted_values(make_card):
    card = make_card(
        ("Login", "login", "bob"),
        ("Password", "password", "pw"),
        ("Website", "website", "https://example.com"),
        ("Email", "email", "bob@example.com"),
        ("Recovery", "text", "pw"),  # same value as the password
        notes="remember me",
    )
    extra = build_extra(card, [], exclude_values=("https://example.com", "bob", "pw"))
    assert extra == "Email: bob@example.com\n\nremember me"


def test_note_extra_dumps_every_field(make_card):
    card = make_card(
        ("Login", "login", "bob"),
        ("Owner", "text", "Bob"),
        notes="",
    )
    assert build_extra(card, []) == "Login: bob\n\nOwner: Bob\n\n"


def test_extra_prefix_and_labels(make_card):
    card = make_card(("Number", "number", "4111"), notes="n")
    extra = build_extra(card, ["Credit Cards", "Personal"], prefix="NoteType:Credit Card")
    assert extra == (
        "NoteType:Credit Card\n\n"
        "Number: 4111\n\n"
        "n"
        "\n\nLabels: Credit Cards, Personal"
    )


def test_empty_fields_are_still_listed(make_card):
    card = make_card(("PIN", "pin", ""))
    assert build_extra(card, [], exclude_values=("a", "b", "c")) == "PIN: \n\n"
