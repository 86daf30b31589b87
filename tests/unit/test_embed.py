"""Tests for editor frame URLs and markup."""

from __future__ import annotations

import pytest

from codebytes.config import CodebytesConfig
from codebytes.embed import (
    build_editor_url,
    decode_text,
    encode_text,
    frame_html,
    frame_style,
)


class TestEncodeText:
    """URL-safe base64 without padding."""

    def test_strips_padding(self) -> None:
        """Padding characters are removed."""
        assert encode_text("a") == "YQ"

    def test_uses_url_safe_alphabet(self) -> None:
        """'-' and '_' replace '+' and '/'."""
        # Standard base64 would be "YWI/Pg=="
        assert encode_text("ab?>") == "YWI_Pg"

    def test_empty(self) -> None:
        """Empty text encodes to an empty string."""
        assert encode_text("") == ""

    @pytest.mark.parametrize("text", ["print('hi')\n", "λx → x", "a\tb"])
    def test_decode_inverts_encode(self, text: str) -> None:
        """decode_text() restores the original text."""
        assert decode_text(encode_text(text)) == text


class TestBuildEditorUrl:
    """Editor frame URL construction."""

    def test_preview_url(self) -> None:
        """Preview URL carries every parameter plus compose mode."""
        url = build_editor_url(
            "python",
            "a",
            page_url="https://forum.example/t/1",
            preview=True,
            config=CodebytesConfig(),
        )
        assert url == (
            "https://www.codecademy.com/codebyte-editor"
            "?lang=python&text=YQ&client-name=forum"
            "&page=https%3A%2F%2Fforum.example%2Ft%2F1&mode=compose"
        )

    def test_published_url_has_no_compose_mode(self) -> None:
        """Published frames omit compose mode."""
        url = build_editor_url(
            "python", "a", page_url="https://forum.example/", config=CodebytesConfig()
        )
        assert "mode=compose" not in url

    def test_language_is_percent_encoded(self) -> None:
        """Language tokens with query characters cannot alter the query."""
        url = build_editor_url("a&b=c", "", page_url="p", config=CodebytesConfig())
        assert "?lang=a%26b%3Dc&text=&" in url

    def test_cpp_language_encoded(self) -> None:
        """The plus in c++ is not left to decode as a space."""
        url = build_editor_url("c++", "", page_url="p", config=CodebytesConfig())
        assert "lang=c%2B%2B&" in url

    def test_unlabelled_codebyte_has_empty_lang(self) -> None:
        """A codebyte without a language sends an empty lang."""
        url = build_editor_url(
            None, "", page_url="https://forum.example/", config=CodebytesConfig()
        )
        assert "?lang=&text=&" in url

    def test_uses_configured_editor_and_client(self) -> None:
        """Editor URL and client name come from config."""
        config = CodebytesConfig(
            editor_url="https://editor.example/embed", client_name="docs"
        )
        url = build_editor_url("go", "x", page_url="p", config=config)
        assert url.startswith("https://editor.example/embed?lang=go&")
        assert "client-name=docs" in url

    def test_defaults_to_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without a config argument the settings singleton is used."""
        monkeypatch.setenv("CODEBYTES__CLIENT_NAME", "from-env")
        url = build_editor_url("go", "x", page_url="p")
        assert "client-name=from-env" in url


class TestFrameMarkup:
    """The iframe element for an editor URL."""

    def test_frame_attributes(self) -> None:
        """The iframe carries id, escaped src and clipboard permission."""
        markup = frame_html("https://e.example/?a=1&b=2", "frame-0", CodebytesConfig())
        assert markup.startswith('<iframe id="frame-0"')
        assert 'src="https://e.example/?a=1&amp;b=2"' in markup
        assert 'allow="clipboard-write"' in markup

    def test_style_uses_configured_dimensions(self) -> None:
        """Frame style reflects configured dimensions."""
        style = frame_style(CodebytesConfig(frame_height=300, frame_max_width=600))
        assert "height: 300px" in style
        assert "max-width: 600px" in style
        assert "border: 0" in style
