"""Dependency injection configuration for the distill CLI."""

from datetime import timedelta
from pathlib import Path

import assemblyai as aai
import httpx
from google import genai

from distill.config import AppConfig
from distill.domain import (
    PAYLOAD_BUILDERS,
    DestinationResolver,
    OutputType,
    RegionalStorageFactory,
)
from distill.handlers import JobPipeline, OutputRenderer
from distill.infrastructure import (
    AssemblyAITranscriber,
    ConsoleProgress,
    GeminiSummarizer,
    MarkdownFileWriter,
    MinioStorageClient,
    TerminalPrompter,
    TextFileWriter,
    WebhookNotificationClient,
    WordFileWriter,
    get_minio_client,
)


def get_storage(config: AppConfig, region: str | None = None) -> MinioStorageClient:
    """Returns a storage client, scoped to ``region`` when one is given."""
    return MinioStorageClient(
        get_minio_client(config.storage, region),
        timedelta(seconds=config.storage.presigned_url_ttl_seconds),
    )


def get_transcriber(config: AppConfig) -> AssemblyAITranscriber:
    """Returns the configured transcription service."""
    aai.settings.api_key = config.assemblyai.api_key
    return AssemblyAITranscriber(
        aai.Transcriber(), speaker_labels=config.assemblyai.speaker_labels
    )


def get_summarizer(config: AppConfig) -> GeminiSummarizer:
    """Returns the configured summarization service."""
    client = genai.Client(api_key=config.gemini.api_key)
    prompt_path = Path(__file__).parent / config.gemini.system_prompt_path
    system_prompt = prompt_path.read_text(encoding="utf-8")
    return GeminiSummarizer(client, config.gemini.model_name, system_prompt)


def get_renderer(config: AppConfig) -> OutputRenderer:
    """Returns the output renderer with every sink wired in."""
    http_client = httpx.Client(timeout=config.notification.timeout_seconds)
    return OutputRenderer(
        writers={
            OutputType.TEXT: TextFileWriter(),
            OutputType.MARKDOWN: MarkdownFileWriter(),
            OutputType.WORD: WordFileWriter(),
        },
        notifier=WebhookNotificationClient(http_client),
        payload_builder=PAYLOAD_BUILDERS[config.notification.payload_format](),
    )


def get_pipeline(config: AppConfig) -> JobPipeline:
    """Returns a job pipeline composed from the given configuration."""
    progress = ConsoleProgress()
    discovery_storage = get_storage(config)

    return JobPipeline(
        config=config,
        destination_resolver=DestinationResolver(
            discovery_storage,
            TerminalPrompter(),
            default_bucket=config.storage.bucket_name,
            reporter=progress,
        ),
        storage_factory=RegionalStorageFactory(
            discovery_storage,
            lambda region: get_storage(config, region),
            default_region=config.storage.default_region,
        ),
        transcriber=get_transcriber(config),
        summarizer=get_summarizer(config),
        renderer=get_renderer(config),
        progress=progress,
    )
