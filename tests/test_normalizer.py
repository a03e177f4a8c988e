import pytest

from doccomment_md.base_extractor import CommentStyle, CommentToken, DocBlock
from doccomment_md.normalizer import StarMode, detect_star_mode, normalize, normalize_block


def block(raw):
    return CommentToken(CommentStyle.BLOCK_STAR, raw)


def test_star_column_is_stripped():
    assert normalize(block("\n * A\n * B")) == DocBlock("A\nB", CommentStyle.BLOCK_STAR)


def test_first_line_content_disables_star_stripping():
    assert normalize_block("Intro\n* bullet") == "Intro\n* bullet"


def test_single_line_block_is_trimmed():
    assert normalize_block(" Hello") == "Hello"


def test_unprefixed_lines_keep_indentation():
    raw = "\n * Text\n *\n     code()\n * * bullet\n"
    assert normalize_block(raw) == "Text\n\n     code()\n* bullet\n"


def test_free_form_block_is_untouched():
    raw = "\nA block comment\n\n* This is a bullet\n\n"
    assert normalize_block(raw) == "A block comment\n\n* This is a bullet\n\n"


@pytest.mark.parametrize("raw", ["", "\n", "  ", "\n *\n *"])
def test_empty_block_produces_nothing(raw):
    assert normalize(block(raw)) is None


def test_triple_slash_body_used_as_is():
    token = CommentToken(CommentStyle.TRIPLE_SLASH, "# Title\n\n  indented")
    assert normalize(token) == DocBlock("# Title\n\n  indented", CommentStyle.TRIPLE_SLASH)


def test_blank_triple_slash_produces_nothing():
    assert normalize(CommentToken(CommentStyle.TRIPLE_SLASH, " \n\t")) is None


def test_detect_star_mode():
    assert detect_star_mode(["  * x"]) is StarMode.STRIP
    assert detect_star_mode(["\t*"]) is StarMode.STRIP
    assert detect_star_mode(["text * x"]) is StarMode.KEEP
    assert detect_star_mode([]) is StarMode.KEEP
