"""Tests for the built-in text transforms."""

from weblog.filters.transforms import html, markdown, sanitize, smartify


def test_markdown_renders_emphasis():
    assert "<em>World</em>" in markdown("Hello, *World*.")


def test_markdown_smartifies_quotes_and_punctuation():
    out = markdown('"Hello," it\'s a *test* -- wait...')

    assert "&ldquo;" in out
    assert "&rdquo;" in out
    assert "it&rsquo;s" in out
    assert "&ndash;" in out
    assert "&hellip;" in out


def test_markdown_empty_input():
    assert markdown("") == ""
    assert markdown(None) == ""


def test_html_is_passthrough():
    assert html("<b>kept</b> as is") == "<b>kept</b> as is"
    assert html(None) == ""


def test_sanitize_strips_script_and_keeps_bold():
    assert sanitize("Hello <script>evil()</script> <b>World</b>") == "Hello  <b>World</b>"


def test_sanitize_strips_object_with_content():
    out = sanitize('Text <object data="x.swf"><param name="a" value="b">fallback</object> more')

    assert out == "Text  more"


def test_sanitize_keeps_allowed_link_and_drops_event_handlers():
    out = sanitize(
        'See <a href="https://example.com/" title="Example" onclick="evil()">this</a>.'
    )

    assert out == 'See <a href="https://example.com/" title="Example">this</a>.'


def test_sanitize_drops_javascript_urls():
    assert sanitize('<a href="javascript:alert(1)">x</a>') == "<a>x</a>"
    assert sanitize('<a href=" JaVa\nScript:alert(1)">x</a>') == "<a>x</a>"
    assert sanitize('<a href="/relative/path">x</a>') == '<a href="/relative/path">x</a>'


def test_sanitize_unwraps_unknown_elements_and_keeps_text():
    out = sanitize('<div class="x"><span style="color:red">hi</span> <em>there</em></div>')

    assert out == "hi <em>there</em>"


def test_sanitize_removes_image_event_handlers_and_comments():
    out = sanitize('a<!-- hidden --><img src="/a.png" alt="A" onerror="x()">b')

    assert "onerror" not in out
    assert "hidden" not in out
    assert 'src="/a.png"' in out
    assert out.startswith("a<img")
    assert out.endswith(">b")


def test_sanitize_keeps_lists_blockquotes_and_code():
    source = "<ul><li>one</li></ul><blockquote><p>quote</p></blockquote><pre><code>x = 1</code></pre>"

    assert sanitize(source) == source


def test_sanitize_empty_input():
    assert sanitize("") == ""
    assert sanitize(None) == ""


def test_smartify_quotes_dashes_and_ellipses():
    out = smartify('"Hello," she said -- it\'s...')

    assert out == "&ldquo;Hello,&rdquo; she said &ndash; it&rsquo;s&hellip;"


def test_smartify_em_dash_and_abbreviated_year():
    assert smartify("a---b") == "a&mdash;b"
    assert smartify("back in '80s") == "back in &rsquo;80s"
    assert smartify("'single'") == "&lsquo;single&rsquo;"


def test_smartify_leaves_tags_untouched():
    out = smartify('<a href="http://example.com/">"hi"</a>')

    assert out == '<a href="http://example.com/">&ldquo;hi&rdquo;</a>'


def test_smartify_skips_code_elements():
    out = smartify('Use <code>"x" -- y</code> "ok"')

    assert out == 'Use <code>"x" -- y</code> &ldquo;ok&rdquo;'


def test_smartify_carries_context_across_tags():
    assert smartify('He said "<em>no</em>"') == "He said &ldquo;<em>no</em>&rdquo;"


def test_smartify_empty_input():
    assert smartify("") == ""
    assert smartify(None) == ""


def test_smartify_treats_bare_less_than_as_text():
    out = smartify("if a < b then 'x' is \"y\" <em>z</em>")

    assert out == "if a < b then &lsquo;x&rsquo; is &ldquo;y&rdquo; <em>z</em>"
