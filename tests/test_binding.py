"""Tests for reading values, labels and errors off the bound model."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from django.core.exceptions import NON_FIELD_ERRORS, ValidationError
from django.test import override_settings

from django_formkit import binding


class NewsletterSignup:
    def __init__(self, **attrs):
        self.__dict__.update(attrs)


class TestNaming:
    def test_param_key_from_model_meta(self, subscriber) -> None:
        assert binding.param_key(subscriber) == "subscriber"

    def test_param_key_from_class_name(self) -> None:
        assert binding.param_key(NewsletterSignup()) == "newsletter_signup"

    def test_param_key_keeps_acronyms_together(self) -> None:
        class HTTPRequestLog:
            pass

        assert binding.param_key(HTTPRequestLog()) == "http_request_log"

    def test_html_name_without_prefix(self) -> None:
        assert binding.html_name("email") == "email"

    def test_html_name_with_prefix(self) -> None:
        assert binding.html_name("email", "billing") == "billing-email"

    def test_auto_id_default(self) -> None:
        assert binding.auto_id("billing-email") == "id_billing-email"

    def test_auto_id_setting(self) -> None:
        with override_settings(FORMKIT={"AUTO_ID": "field_%s"}):
            assert binding.auto_id("email") == "field_email"


class TestModelMetadata:
    def test_value_from_attribute(self, subscriber) -> None:
        assert binding.field_value(subscriber, "email") == "ada@example.com"

    def test_value_from_mapping(self) -> None:
        assert binding.field_value({"email": "ada@example.com"}, "email") == "ada@example.com"

    def test_missing_value_is_none(self) -> None:
        assert binding.field_value(SimpleNamespace(), "email") is None

    def test_label_from_verbose_name(self, subscriber) -> None:
        assert str(binding.field_label(subscriber, "email")) == "Email address"

    def test_label_from_attribute_name(self) -> None:
        assert binding.field_label(SimpleNamespace(), "full_name") == "Full name"

    def test_label_for_non_field_attribute(self, subscriber) -> None:
        assert binding.field_label(subscriber, "favourite_colour") == "Favourite colour"

    def test_help_text(self, subscriber) -> None:
        assert str(binding.field_help_text(subscriber, "email")) == "We never share it."

    def test_empty_help_text_is_none(self, subscriber) -> None:
        assert binding.field_help_text(subscriber, "full_name") is None

    def test_choices(self, subscriber) -> None:
        assert binding.field_choices(subscriber, "plan") == [("free", "Free"), ("pro", "Pro")]

    def test_no_choices(self, subscriber) -> None:
        assert binding.field_choices(subscriber, "email") is None


class TestCollectErrors:
    def test_no_errors(self, subscriber) -> None:
        assert binding.collect_errors(subscriber) == {}

    def test_errors_attribute_on_model(self) -> None:
        model = SimpleNamespace(email="", errors={"email": ["Enter an email."]})
        assert binding.collect_errors(model) == {"email": ["Enter an email."]}

    def test_explicit_errors_win(self) -> None:
        model = SimpleNamespace(errors={"email": ["From the model."]})
        assert binding.collect_errors(model, {"email": ["Explicit."]}) == {"email": ["Explicit."]}

    def test_single_message_string(self) -> None:
        assert binding.collect_errors(SimpleNamespace(), {"email": "Required."}) == {"email": ["Required."]}

    def test_validation_error_dict(self, subscriber) -> None:
        error = ValidationError({"email": ["Enter a valid email address."]})
        assert binding.collect_errors(subscriber, error) == {"email": ["Enter a valid email address."]}

    def test_flat_validation_error_is_non_field(self, subscriber) -> None:
        error = ValidationError("Subscriptions are closed.")
        assert binding.collect_errors(subscriber, error) == {NON_FIELD_ERRORS: ["Subscriptions are closed."]}

    def test_mapping_model_has_no_errors_attribute(self) -> None:
        assert binding.collect_errors({"errors": "not errors"}) == {}

    def test_rejects_other_shapes(self, subscriber) -> None:
        with pytest.raises(TypeError):
            binding.collect_errors(subscriber, ["Required."])
