from justlib.suggestion import Suggestion


def test_plain_suggestion():
    assert str(Suggestion("abc")) == "Did you mean `abc`?"


def test_alias_suggestion():
    assert str(Suggestion("b", "build")) == "Did you mean `b`, an alias for `build`?"


def test_alias_text_only_with_target():
    assert "alias" not in str(Suggestion("foo"))
    assert str(Suggestion("foo", "bar")).endswith("?")
    assert "`bar`" in str(Suggestion("foo", "bar"))