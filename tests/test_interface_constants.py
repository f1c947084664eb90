import re

from interface.constants import LANG_PACK, PANE_LABEL_KEYS
from interface.i18n import effective_lang, translate


def test_constants_values_present():
    assert "en" in LANG_PACK and "ru" in LANG_PACK
    assert set(PANE_LABEL_KEYS.values()) <= set(LANG_PACK["en"])


def test_translations_keep_placeholders():
    for key, template in LANG_PACK["ru"].items():
        english = LANG_PACK["en"].get(key)
        assert english is not None, key
        assert set(re.findall(r"{(\w+)}", template)) == set(re.findall(r"{(\w+)}", english)), key


def test_translate_formats_and_falls_back():
    assert translate("STATUS_UNDO_DEPTH", "en", depth=3) == "undo 3"
    assert translate("STATUS_UNDO_DEPTH", "ru", depth=3) == "отмена 3"
    assert translate("NO_SUCH_KEY", "en") == "NO_SUCH_KEY"
    assert translate("STATUS_UNDO_DEPTH", "en") == "undo {depth}"


def test_effective_lang(monkeypatch):
    monkeypatch.delenv("TASKSHELF_LANG", raising=False)
    assert effective_lang() == "en"
    assert effective_lang("ru") == "ru"
    assert effective_lang("xx") == "en"
    monkeypatch.setenv("TASKSHELF_LANG", "ru")
    assert effective_lang("en") == "ru"
