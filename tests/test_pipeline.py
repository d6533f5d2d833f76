import pytest

from promptmaster.pipeline import (
    CONTENT_TYPES,
    classify_content_type,
    describe_length,
    describe_tone,
    enhance_input,
    infer_purpose_context,
)
from promptmaster.schemas import PromptRequest


def make_request(**overrides):
    fields = {
        "title": "Machine learning fundamentals",
        "context": "A friendly walk through the core ideas of supervised learning",
        "purpose": "give newcomers a solid mental model of training",
        "tone": "professional",
        "length": "medium",
    }
    fields.update(overrides)
    return PromptRequest(**fields)


@pytest.mark.parametrize(
    "context, expected",
    [
        ("Write a BLOG entry", "blog post"),
        ("a short poem about stars", "educational poem"),
        ("an article and a story", "narrative"),
        ("a tutorial or a guide", "comprehensive guide"),
        ("quarterly report with summary", "report"),
        ("product review", "review"),
        ("something else entirely", "comprehensive guide"),
        ("", "comprehensive guide"),
    ],
)
def test_classify_content_type(context, expected):
    assert classify_content_type(context) == expected


def test_classify_uses_table_order_not_text_position():
    # "review" appears first in the text but "blog" comes first in the table.
    assert classify_content_type("review of my blog") == "blog post"


def test_every_keyword_maps_to_its_label_on_its_own():
    for keyword, label in CONTENT_TYPES:
        assert classify_content_type(f"please write a {keyword}") == label


def test_infer_purpose_context_teach_branch():
    assert infer_purpose_context("We want to Educate people", "blog post") == (
        "This blog post should effectively educate and inform readers "
        "through clear explanations and examples."
    )


def test_infer_purpose_context_explain_branch():
    assert infer_purpose_context("introduce the basics", "overview") == (
        "The content should break down complex concepts into "
        "easy-to-understand explanations."
    )


def test_infer_purpose_context_keeps_original_case_in_generic_branch():
    assert infer_purpose_context("Inspire New Readers", "review") == (
        "This review should effectively Inspire New Readers while maintaining "
        "clarity and engagement."
    )


def test_describers_and_fallbacks():
    assert describe_length("short") == "1-2 concise paragraphs with clear points"
    assert describe_length("long").startswith("comprehensive coverage")
    assert describe_length("unknown") == describe_length("medium")
    assert describe_tone("casual") == "friendly and conversational"
    assert describe_tone("formal") == "structured and detailed"
    assert describe_tone("unknown") == describe_tone("professional")


def test_short_title_gets_introduction_prefix():
    enhanced = enhance_input(make_request(title="  Rust  "))
    assert enhanced.title == "Introduction to Rust"


def test_long_title_is_trimmed_but_not_prefixed():
    enhanced = enhance_input(make_request(title="  Distributed systems  "))
    assert enhanced.title == "Distributed systems"


def test_prefixed_title_is_left_alone():
    enhanced = enhance_input(make_request(title="Guide to Go"))
    assert enhanced.title == "Guide to Go"


def test_long_context_and_purpose_are_unchanged():
    request = make_request()
    enhanced = enhance_input(request)
    assert enhanced.context == request.context
    assert enhanced.purpose == request.purpose
    assert enhanced.tone == "professional"
    assert enhanced.length == "medium"


def test_brief_context_is_expanded_from_original_content_type():
    enhanced = enhance_input(make_request(title="Quantum computing", context="a story"))
    assert enhanced.context == (
        "This narrative aims to explain Quantum computing in a clear and "
        "comprehensive way, focusing on key concepts and practical applications"
    )


def test_enhance_does_not_mutate_request(sample_request):
    enhance_input(sample_request)
    assert sample_request.title == "AI"
    assert sample_request.context == "short blog"


def test_example_request(sample_request):
    enhanced = enhance_input(sample_request)
    assert enhanced.title == "Introduction to AI"
    assert enhanced.context == (
        "This blog post aims to explain Introduction to AI in a clear and "
        "comprehensive way, focusing on key concepts and practical applications"
    )
    assert enhanced.purpose == (
        "help readers understand Introduction to AI through clear explanations "
        "and practical examples"
    )
    assert enhanced.tone == "casual"
    assert enhanced.length == "short"


@pytest.mark.parametrize(
    "title, expected",
    [
        ("ABCDEFGHI", "Introduction to ABCDEFGHI"),
        ("  ABCDEFGHI  ", "Introduction to ABCDEFGHI"),
        ("ABCDEFGHIJ", "ABCDEFGHIJ"),
        ("  ABCDEFGHIJ ", "ABCDEFGHIJ"),
        ("GUIDE TO go", "GUIDE TO go"),
        ("Understanding", "Understanding"),
        ("the Basics of C", "the Basics of C"),
        ("INTRODUCTION TO x", "INTRODUCTION TO x"),
    ],
)
def test_title_length_and_prefix_boundaries(title, expected):
    assert enhance_input(make_request(title=title)).title == expected


@pytest.mark.parametrize(
    "context",
    [
        "one two three four five",
        "one\ntwo\nthree\nfour\nfive",
        "one\ttwo\tthree\tfour\tfive",
        "  one   two \n three\t four  five  ",
    ],
)
def test_context_with_five_words_is_unchanged(context):
    assert enhance_input(make_request(context=context)).context == context


@pytest.mark.parametrize(
    "context",
    [
        "one two three four",
        "a    blog",
        "one\ntwo\nthree\nfour",
        "   ",
    ],
)
def test_context_with_fewer_than_five_words_is_expanded(context):
    enhanced = enhance_input(make_request(context=context))
    assert enhanced.context != context
    assert enhanced.context.endswith(
        "in a clear and comprehensive way, focusing on key concepts and practical applications"
    )


def test_expanded_context_keeps_keyword_from_spaced_out_original():
    enhanced = enhance_input(make_request(context="a    blog"))
    assert enhanced.context.startswith("This blog post aims to explain")


@pytest.mark.parametrize(
    "purpose, expanded",
    [
        ("teach people about neural networks", False),
        ("teach\tpeople\tabout\tneural\tnetworks", False),
        ("teach\npeople\nabout\nneural\nnetworks", False),
        ("teach people about nets", True),
        ("teach  people   about    nets", True),
        ("  \t ", True),
    ],
)
def test_purpose_word_boundary(purpose, expanded):
    enhanced = enhance_input(make_request(title="Neural networks", purpose=purpose))
    if expanded:
        assert enhanced.purpose == (
            "help readers understand Neural networks through clear explanations "
            "and practical examples"
        )
    else:
        assert enhanced.purpose == purpose
