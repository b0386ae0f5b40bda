from halberd.core import config as config_mod
from halberd.core.config import RenderConfig, load_render_config, parse_indent


def test_parse_indent_variants():
    assert parse_indent(None) is None
    assert parse_indent("") is None
    assert parse_indent("2") == "  "
    assert parse_indent("\\t") == "\t"
    assert parse_indent("--") == "--"


def test_load_render_config_defaults(monkeypatch):
    monkeypatch.delenv("HALBERD_XML_INDENT", raising=False)
    monkeypatch.delenv("HALBERD_JSON_INDENT", raising=False)
    monkeypatch.delenv("HALBERD_LOG_LEVEL", raising=False)

    assert load_render_config(use_dotenv=False) == RenderConfig()


def test_load_render_config_from_env(monkeypatch):
    monkeypatch.setenv("HALBERD_XML_INDENT", "4")
    monkeypatch.setenv("HALBERD_JSON_INDENT", "\\t")
    monkeypatch.setenv("HALBERD_LOG_LEVEL", "debug")

    cfg = load_render_config(use_dotenv=False)
    assert cfg.xml_indent == "    "
    assert cfg.json_indent == "\t"
    assert cfg.log_level == "DEBUG"


def test_load_render_config_reads_dotenv(monkeypatch):
    calls = []
    monkeypatch.setattr(config_mod, "load_dotenv", lambda *a, **k: calls.append(1))
    monkeypatch.delenv("HALBERD_XML_INDENT", raising=False)

    load_render_config()
    assert calls == [1]
