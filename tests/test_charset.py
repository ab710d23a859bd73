import string

from gotpasswd.charset import (
    DICTIONARY,
    CharacterKind,
    build_dictionary,
    classify,
    describe_dictionary,
)


def test_pools_contents():
    assert DICTIONARY[CharacterKind.ALPHABET] == string.ascii_uppercase + string.ascii_lowercase
    assert DICTIONARY[CharacterKind.NUMBER] == string.digits
    assert DICTIONARY[CharacterKind.SYMBOL] == "$+<=>^`|~"
    assert DICTIONARY[CharacterKind.UNDERSCORE] == "_"
    assert DICTIONARY[CharacterKind.SPACE] == " "


def test_classes_are_disjoint():
    seen = set()
    for chars in DICTIONARY.values():
        assert not seen & set(chars)
        seen |= set(chars)


def test_every_pooled_char_is_printable_ascii():
    for chars in DICTIONARY.values():
        assert all(0x20 <= ord(c) <= 0x7E for c in chars)


def test_other_punctuation_is_excluded():
    for c in "!\"#%&'()*,-./:;?@[\\]{}":
        assert classify(c) is None


def test_underscore_special_case():
    assert classify("_") is CharacterKind.UNDERSCORE


def test_non_printable_range_is_fatal():
    try:
        build_dictionary(0x00, 0x7E)
        raised = False
    except RuntimeError:
        raised = True
    assert raised


def test_describe_dictionary_follows_enum_order():
    kinds = [kind for kind, _ in describe_dictionary()]
    assert kinds == list(CharacterKind)
