from justlib.warning import Warning as JustWarning


def test_plain_message():
    text = JustWarning.DOTENV_LOAD.__str__()
    assert text.startswith("warning: A `.env` file was found and loaded")
    assert "    set dotenv-load := true\n" in text
    assert "    set dotenv-load := false\n" in text


def test_no_context():
    assert JustWarning.DOTENV_LOAD.context() is None


def test_render_wraps_parts():
    rendered = JustWarning.DOTENV_LOAD.render("<w>", "</w>", "<m>", "</m>")
    assert rendered.startswith("<w>warning:</w> <m>")
    assert rendered.endswith("</m>")


def test_render_without_codes_matches_str():
    rendered = JustWarning.DOTENV_LOAD.render("<w>", "</w>", "<m>", "</m>")
    stripped = rendered
    for code in ("<w>", "</w>", "<m>", "</m>"):
        stripped = stripped.replace(code, "")
    assert stripped == str(JustWarning.DOTENV_LOAD)