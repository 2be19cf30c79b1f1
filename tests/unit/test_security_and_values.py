"""JWT, password hashing, request ID sanitizing, slugs, codes and HTML cleaning."""

from datetime import timedelta

import pytest

from app.domain.value_objects import PromptCode, Slug, slugify
from app.infrastructure.security.jwt import create_access_token, verify_token
from app.infrastructure.security.password import get_password_hash, verify_password
from app.middleware.request_id import REQUEST_ID_MAX_LENGTH, sanitize_request_id
from app.shared.utils import ContentSanitizer, generate_prompt_code


def test_token_round_trip_carries_role() -> None:
    payload = verify_token(create_access_token("u1", "admin"))
    assert payload["sub"] == "u1"
    assert payload["role"] == "admin"


def test_expired_and_tampered_tokens_are_rejected() -> None:
    with pytest.raises(ValueError):
        verify_token(create_access_token("u1", "user", expires_delta=timedelta(seconds=-5)))
    token = create_access_token("u1", "user")
    other = create_access_token("u2", "admin")
    forged = token.rsplit(".", 1)[0] + "." + other.rsplit(".", 1)[1]
    with pytest.raises(ValueError):
        verify_token(forged)


def test_password_hash_verifies_and_handles_long_input() -> None:
    long_password = "p" * 100
    hashed = get_password_hash(long_password)
    assert verify_password(long_password, hashed)
    # Differs only after bcrypt's 72-byte window.
    assert not verify_password("p" * 99 + "q", hashed)
    assert not verify_password("anything", "not-a-bcrypt-hash")


def test_request_id_keeps_safe_values_only() -> None:
    assert sanitize_request_id("abc-123_X") == "abc-123_X"
    generated = sanitize_request_id("bad id\n")
    assert generated != "bad id\n" and len(generated) == 36
    assert sanitize_request_id("a" * (REQUEST_ID_MAX_LENGTH + 1)) != "a" * (REQUEST_ID_MAX_LENGTH + 1)
    assert len(sanitize_request_id(None)) == 36


@pytest.mark.parametrize(
    ("title", "slug"),
    [
        ("Neon City Samurai", "neon-city-samurai"),
        ("  Golden -- Hour!! ", "golden-hour"),
        ("Café au lait", "caf-au-lait"),
    ],
)
def test_slugify(title: str, slug: str) -> None:
    assert slugify(title) == slug


def test_slug_and_code_validation() -> None:
    assert Slug.from_title("Misty Lake").value == "misty-lake"
    with pytest.raises(ValueError):
        Slug("Upper-Case")
    with pytest.raises(ValueError):
        Slug.from_title("!!!")
    assert str(PromptCode("0427")) == "0427"
    with pytest.raises(ValueError):
        PromptCode("427")


def test_generated_prompt_codes_are_four_digits() -> None:
    for _ in range(50):
        PromptCode(generate_prompt_code())


def test_article_html_keeps_formatting_and_drops_scripts() -> None:
    cleaned = ContentSanitizer.clean_article(
        '<h2>Tips</h2><p><a href="javascript:alert(1)">x</a><strong>bold</strong></p><iframe></iframe>'
    )
    assert "<h2>Tips</h2>" in cleaned
    assert "<strong>bold</strong>" in cleaned
    assert "javascript:" not in cleaned
    assert "<iframe" not in cleaned
    assert ContentSanitizer.clean_article("") == ""
