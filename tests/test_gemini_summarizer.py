from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from distill.exceptions import SummarizationError
from distill.infrastructure import GeminiSummarizer


def make_summarizer(client):
    return GeminiSummarizer(client, "gemini-test", "Summarize the meeting.")


def test_summary_is_stripped():
    client = Mock()
    client.models.generate_content.return_value = SimpleNamespace(text="\nSummary\nAll good.\n")

    assert make_summarizer(client).summarize("transcript") == "Summary\nAll good."
    client.models.generate_content.assert_called_once_with(
        model="gemini-test",
        contents="transcript",
        config={"system_instruction": "Summarize the meeting."},
    )


@pytest.mark.parametrize("text", [None, ""])
def test_empty_response_raises(text):
    client = Mock()
    client.models.generate_content.return_value = SimpleNamespace(text=text)

    with pytest.raises(SummarizationError, match="empty response"):
        make_summarizer(client).summarize("transcript")


def test_api_error_is_wrapped():
    client = Mock()
    client.models.generate_content.side_effect = RuntimeError("quota exceeded")

    with pytest.raises(SummarizationError, match="quota exceeded") as exc_info:
        make_summarizer(client).summarize("transcript")

    assert isinstance(exc_info.value.cause, RuntimeError)
