"""Tests for TranscriptionOutcome and TranscriptionRequest entities."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from voxnote.l1_entities.outcome import OutcomeKind, TranscriptionOutcome
from voxnote.l1_entities.request import TranscriptionRequest


class TestTranscriptionOutcome:
    def test_from_text_trims(self):
        outcome = TranscriptionOutcome.from_text('  hello world  ')
        assert outcome.kind is OutcomeKind.SUCCESS
        assert outcome.text == 'hello world'

    @pytest.mark.parametrize('text', ['', '   ', '\n\t', None])
    def test_from_text_blank_is_empty(self, text):
        assert TranscriptionOutcome.from_text(text).kind is OutcomeKind.EMPTY

    def test_failed_carries_detail(self):
        outcome = TranscriptionOutcome.failed('HTTP error 500: boom')
        assert outcome.kind is OutcomeKind.FAILED
        assert outcome.detail == 'HTTP error 500: boom'
        assert outcome.text == ''

    def test_rate_limited(self):
        assert TranscriptionOutcome.rate_limited().kind is OutcomeKind.RATE_LIMITED

    def test_frozen(self):
        outcome = TranscriptionOutcome.success('hi')
        with pytest.raises(ValidationError):
            outcome.text = 'changed'


class TestTranscriptionRequest:
    def test_optional_fields_default_empty(self):
        request = TranscriptionRequest(file_path='/tmp/a.ogg')
        assert request.mime_type == ''
        assert request.prompt_hint == ''
        assert request.system_context == ''

    def test_immutable(self):
        request = TranscriptionRequest(file_path='/tmp/a.ogg')
        with pytest.raises(ValidationError):
            request.file_path = '/tmp/b.ogg'
