from doccomment_md import CommentStyle, DocBlock, DocCommentExtractor


def texts(source):
    return [b.text for b in DocCommentExtractor.extract_comments(source)]


def test_triple_slash_lines_merge_into_one_block():
    assert DocCommentExtractor.extract_comments("/// A\n/// B\n") == [
        DocBlock("A\nB", CommentStyle.TRIPLE_SLASH)
    ]


def test_non_adjacent_triple_slash_comments_stay_separate():
    assert texts("/// A\nconst x = 1;\n/// B\n") == ["A", "B"]


def test_order_follows_source():
    source = "/** first */\n/// second\n/**\n * third\n */\nfunction f() {}\n"
    assert texts(source) == ["first", "second", "third\n"]


def test_excluded_openers_produce_no_blocks():
    source = "//// separator\n/*** banner ***/\n// plain\n/* plain */\n/// real"
    assert texts(source) == ["real"]


def test_opener_followed_by_other_character():
    assert texts("///x\n") == ["x"]
    assert texts("/**x*/") == ["x"]


def test_indented_and_tabbed_openers():
    assert texts("    /// indented\n\t///\ttab") == ["indented\ntab"]


def test_unterminated_block_yields_nothing():
    assert texts("/**\n * never closed\n") == []


def test_whitespace_only_comments_are_dropped():
    assert texts("/**   */\n///   \n/**\n */") == []


def test_no_comments():
    assert texts("const a = 1; // not docs\n") == []


def test_mixed_star_example():
    source = (
        "/**\n"
        " * This is a block comment.\n"
        " *\n"
        "For lines that don't, no big deal.\n"
        "\n"
        "    Leading whitespace will be preserved here.\n"
        "\n"
        " * * This is a bullet\n"
        " */\n"
    )
    assert texts(source) == [
        "This is a block comment.\n"
        "\n"
        "For lines that don't, no big deal.\n"
        "\n"
        "    Leading whitespace will be preserved here.\n"
        "\n"
        "* This is a bullet\n"
    ]
