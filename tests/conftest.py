from pathlib import Path

import pytest

from distill.config import (
    AppConfig,
    AssemblyAIConfig,
    GeminiConfig,
    NotificationConfig,
    StorageConfig,
)
from distill.domain import (
    DestinationResolver,
    OutputType,
    RegionalStorageFactory,
    SectionedPayloadBuilder,
)
from distill.exceptions import (
    PreconditionError,
    StorageError,
    SummarizationError,
    TranscriptionError,
)
from distill.handlers import JobPipeline, OutputRenderer
from distill.infrastructure import MarkdownFileWriter, TextFileWriter, WordFileWriter
from distill.infrastructure.interfaces import (
    BucketPrompter,
    NotificationClient,
    ProgressReporter,
    StorageClient,
    SummarizationService,
    TranscriptionService,
)

SUMMARY_TEXT = (
    "Summary\n"
    "The team reviewed the launch plan.\n"
    "\n"
    "Action items\n"
    "- Alice to update the rollout doc\n"
    "- Bob to book the venue\n"
)
TRANSCRIPT_TEXT = "Speaker A: Let's review the plan.\nSpeaker B: Sounds good."


class FakeStorage(StorageClient):
    def __init__(
        self,
        buckets=None,
        constraint="",
        region=None,
        list_error=None,
        upload_error=None,
    ):
        self.buckets = ["audio-bucket"] if buckets is None else buckets
        self.constraint = constraint
        self.region = region
        self.list_error = list_error
        self.upload_error = upload_error
        self.calls = []
        self.uploaded = {}

    def list_buckets(self):
        self.calls.append(("list_buckets",))
        if self.list_error:
            raise StorageError("list buckets", cause=self.list_error)
        return list(self.buckets)

    def locate_bucket(self, bucket_name):
        self.calls.append(("locate_bucket", bucket_name))
        return self.constraint

    def upload(self, bucket_name, object_name, data, size, content_type):
        self.calls.append(("upload", bucket_name, object_name, size, content_type))
        if self.upload_error:
            raise StorageError("upload", bucket_name, object_name, cause=self.upload_error)
        self.uploaded[(bucket_name, object_name)] = data.read()

    def delete(self, bucket_name, object_name):
        self.calls.append(("delete", bucket_name, object_name))

    def staged_uri(self, bucket_name, object_name):
        self.calls.append(("staged_uri", bucket_name, object_name))
        return f"https://storage.example/{bucket_name}/{object_name}?signed"


class FakePrompter(BucketPrompter):
    def __init__(self, selection=0):
        self.selection = selection
        self.calls = []

    def choose(self, prompt, items):
        self.calls.append(list(items))
        return self.selection


class FakeTranscriber(TranscriptionService):
    def __init__(self, transcript=TRANSCRIPT_TEXT, error=None):
        self.transcript = transcript
        self.error = error
        self.calls = []

    def transcribe(self, audio_path, audio_uri, language_code):
        self.calls.append((audio_path, audio_uri, language_code))
        if self.error:
            raise TranscriptionError(Path(audio_path).name, self.error)
        return self.transcript


class FakeSummarizer(SummarizationService):
    def __init__(self, summary=SUMMARY_TEXT, error=None):
        self.summary = summary
        self.error = error
        self.calls = []

    def summarize(self, transcript):
        self.calls.append(transcript)
        if self.error:
            raise SummarizationError("Summarization failed", cause=self.error)
        return self.summary


class FakeNotifier(NotificationClient):
    def __init__(self, status=200, error=None):
        self.status = status
        self.error = error
        self.posts = []

    def post(self, endpoint, payload):
        self.posts.append((endpoint, payload))
        if self.error:
            raise self.error
        return self.status


class RecordingProgress(ProgressReporter):
    def __init__(self):
        self.events = []

    def update(self, label):
        self.events.append(("update", label))

    def success(self, message):
        self.events.append(("success", message))

    def warn(self, message):
        self.events.append(("warn", message))

    def fail(self, message):
        self.events.append(("fail", message))

    def of_kind(self, kind):
        return [message for event, message in self.events if event == kind]


def make_config(bucket_name="", webhook_endpoint=""):
    return AppConfig(
        storage=StorageConfig(bucket_name=bucket_name),
        assemblyai=AssemblyAIConfig(api_key="test"),
        gemini=GeminiConfig(api_key="test"),
        notification=NotificationConfig(webhook_endpoint=webhook_endpoint),
    )


class PipelineHarness:
    """Wires a JobPipeline to fakes and records every collaborator call."""

    def __init__(
        self,
        *,
        bucket_name="",
        webhook_endpoint="",
        discovery=None,
        regional=None,
        prompter=None,
        transcriber=None,
        summarizer=None,
        notifier=None,
        writers=None,
        progress=None,
    ):
        self.discovery = discovery or FakeStorage()
        self.regional = regional or FakeStorage()
        self.prompter = prompter or FakePrompter()
        self.transcriber = transcriber or FakeTranscriber()
        self.summarizer = summarizer or FakeSummarizer()
        self.notifier = notifier or FakeNotifier()
        self.progress = progress or RecordingProgress()
        self.built_regions = []

        def build_client(region):
            self.built_regions.append(region)
            self.regional.region = region
            return self.regional

        self.renderer = OutputRenderer(
            writers=writers
            or {
                OutputType.TEXT: TextFileWriter(),
                OutputType.MARKDOWN: MarkdownFileWriter(),
                OutputType.WORD: WordFileWriter(),
            },
            notifier=self.notifier,
            payload_builder=SectionedPayloadBuilder(),
        )
        self.pipeline = JobPipeline(
            config=make_config(bucket_name, webhook_endpoint),
            destination_resolver=DestinationResolver(
                self.discovery,
                self.prompter,
                default_bucket=bucket_name,
                reporter=self.progress,
            ),
            storage_factory=RegionalStorageFactory(self.discovery, build_client),
            transcriber=self.transcriber,
            summarizer=self.summarizer,
            renderer=self.renderer,
            progress=self.progress,
        )

    def collaborator_calls(self):
        return (
            len(self.discovery.calls)
            + len(self.regional.calls)
            + len(self.prompter.calls)
            + len(self.transcriber.calls)
            + len(self.summarizer.calls)
            + len(self.notifier.posts)
        )


@pytest.fixture
def audio_file(tmp_path):
    path = tmp_path / "meeting.mp3"
    path.write_bytes(b"ID3fake-audio")
    return path


@pytest.fixture
def harness_factory():
    return PipelineHarness


@pytest.fixture
def failing_prompter():
    class _Prompter(BucketPrompter):
        def choose(self, prompt, items):
            raise PreconditionError("No bucket selected")

    return _Prompter()
