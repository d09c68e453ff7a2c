from __future__ import annotations

import pytest
from pydantic import ValidationError

from metagen.models.request import GenerationRequest, TagVariant
from metagen.services.prompt_builder import TAG_VARIANT_INSTRUCTIONS, build_payload, build_prompt


def _request(**overrides) -> GenerationRequest:
    fields = {
        "description": "bakery in Lisbon selling pastel de nata",
        "language": "Portuguese",
        "robotsIndex": True,
        "robotsFollow": True,
        "tagVariant": "selfClosing",
    }
    fields.update(overrides)
    return GenerationRequest.model_validate(fields)


def test_prompt_embeds_fields_verbatim() -> None:
    description = 'shop for <b>"handmade"</b> soap & candles'
    prompt = build_prompt(_request(description=description, robotsFollow=False))
    assert f"My company is a {description} and I want to rank on Google." in prompt
    assert "I want to use the following language: Portuguese." in prompt
    assert "index: true, follow: false." in prompt


def test_tag_variant_changes_only_its_instruction() -> None:
    closing = build_prompt(_request(tagVariant="selfClosing"))
    open_ = build_prompt(_request(tagVariant="nonSelfClosing"))
    assert closing != open_
    assert TAG_VARIANT_INSTRUCTIONS[TagVariant.SELF_CLOSING] in closing
    assert TAG_VARIANT_INSTRUCTIONS[TagVariant.NON_SELF_CLOSING] in open_
    assert closing.replace(TAG_VARIANT_INSTRUCTIONS[TagVariant.SELF_CLOSING], "") == open_.replace(
        TAG_VARIANT_INSTRUCTIONS[TagVariant.NON_SELF_CLOSING], ""
    )


def test_tag_variant_changes_only_user_message_in_payload() -> None:
    closing = build_payload(build_prompt(_request(tagVariant="selfClosing")), "m")
    open_ = build_payload(build_prompt(_request(tagVariant="nonSelfClosing")), "m")
    assert closing["messages"][1] != open_["messages"][1]
    assert {k: v for k, v in closing.items() if k != "messages"} == {
        k: v for k, v in open_.items() if k != "messages"
    }
    assert closing["messages"][0] == open_["messages"][0]


@pytest.mark.parametrize("length", [1, 280])
def test_description_length_accepted(length: int) -> None:
    assert len(_request(description="a" * length).description) == length


@pytest.mark.parametrize("length", [0, 281])
def test_description_length_rejected(length: int) -> None:
    with pytest.raises(ValidationError):
        _request(description="a" * length)


def test_request_defaults_and_wire_names() -> None:
    request = GenerationRequest(description="blog about birds")
    assert request.to_wire() == {
        "description": "blog about birds",
        "language": "English",
        "robotsIndex": False,
        "robotsFollow": False,
        "tagVariant": "nonSelfClosing",
    }


def test_request_is_immutable() -> None:
    request = _request()
    with pytest.raises(ValidationError):
        request.description = "something else"  # type: ignore[misc]


def test_tag_variant_copy() -> None:
    assert TagVariant.SELF_CLOSING.label == "Self-closing"
    assert "wrap content" in TagVariant.NON_SELF_CLOSING.description
