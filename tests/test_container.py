from pathlib import Path

from mdview.di.container import Container
from mdview.services.code_highlighter import CodeBlockHighlighter
from mdview.services.config.app_config import build_app_config
from mdview.services.markdown_renderer import MarkdownRenderer


def _config(tmp_path: Path, text: str = ""):
    ini = tmp_path / "config.ini"
    ini.write_text(text, encoding="utf-8")
    return build_app_config(explicit_ini=ini, project_root=tmp_path)


def test_container_wires_services(tmp_path):
    c = Container(config=_config(tmp_path))
    assert isinstance(c.highlighter, CodeBlockHighlighter)
    assert isinstance(c.renderer, MarkdownRenderer)
    assert c.renderer.highlighter is c.highlighter
    assert c.facade.renderer is c.renderer
    assert c.facade.files is c.file_service
    assert c.facade.show_raw is False


def test_container_applies_start_raw(tmp_path):
    c = Container(config=_config(tmp_path, "[viewer]\nstart_raw = true\n"))
    assert c.facade.show_raw is True


def test_container_accepts_injected_renderer(tmp_path):
    class Echo:
        def render(self, markdown_text, base_dir=""):
            return markdown_text

    c = Container(config=_config(tmp_path), renderer=Echo())
    doc = tmp_path / "a.md"
    doc.write_text("*x*", encoding="utf-8")
    assert c.facade.load(doc) is True
    assert c.facade.get_pretty() == "*x*"


def test_container_builds_window(qapp, tmp_path):
    c = Container(config=_config(tmp_path))
    w = c.build_main_window(app_title="Test")
    try:
        assert w.windowTitle() == "Test"
        assert w.facade is c.facade
    finally:
        w.close()
