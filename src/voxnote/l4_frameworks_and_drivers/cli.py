"""CLI entry point for voxnote."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from voxnote import __version__

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_RATE_LIMITED = 2


class EchoCallback:
    """Prints whichever outcome arrives and remembers the exit code for it."""

    def __init__(self) -> None:
        self.exit_code: int | None = None

    def on_success(self, text: str) -> None:
        click.echo(text)
        self.exit_code = EXIT_OK

    def on_empty(self) -> None:
        click.echo('No speech recognized.', err=True)
        self.exit_code = EXIT_OK

    def on_failed(self, detail: str) -> None:
        click.echo(f'Error: transcription failed: {detail}', err=True)
        self.exit_code = EXIT_FAILED

    def on_too_many_requests(self) -> None:
        click.echo('Error: rate limited by the transcription API, try again later.', err=True)
        self.exit_code = EXIT_RATE_LIMITED


@click.command()
@click.argument('audio_file', type=click.Path(dir_okay=False))
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.option(
    '-p',
    '--provider',
    type=click.Choice(['cloud', 'local']),
    default=None,
    help='Override the configured provider.',
)
@click.option('--mime-type', default='', help='MIME type of the attachment (inferred from the extension if omitted).')
@click.option('--prompt', 'prompt_hint', default='', help='Vocabulary or style hint for the cloud provider.')
@click.option(
    '--api-key',
    envvar='OPENAI_API_KEY',
    default=None,
    help='Cloud API key; enables the cloud provider. Reads OPENAI_API_KEY if unset.',
)
@click.option(
    '--debug-log',
    'debug_log_dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Directory for the debug log file.',
)
@click.version_option(version=__version__)
def cli(audio_file, config_path, provider, mime_type, prompt_hint, api_key, debug_log_dir):
    """voxnote -- transcribe an audio attachment with the cloud API or an on-device model."""
    from voxnote.l1_entities.request import TranscriptionRequest  # noqa: PLC0415 -- deferred: not needed for --help
    from voxnote.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from voxnote.l4_frameworks_and_drivers.config import build_app_config  # noqa: PLC0415 -- deferred: not needed for --help
    from voxnote.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: not needed for --help
        DependencyContainer,
    )

    if debug_log_dir:
        from voxnote.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: only with --debug-log
            setup_file_logging,
        )

        setup_file_logging(Path(debug_log_dir))

    overrides: dict = {}
    if provider:
        overrides.setdefault('providers', {})['provider'] = provider
    if api_key:
        overrides.setdefault('providers', {})['cloud'] = {'enabled': True, 'api_key': api_key}

    try:
        raw = YamlConfigLoader().load_raw(config_path, overrides=overrides or None)
        config = build_app_config(raw)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(EXIT_FAILED)

    request = TranscriptionRequest(file_path=audio_file, mime_type=mime_type, prompt_hint=prompt_hint)
    callback = EchoCallback()

    container = DependencyContainer(config)
    with container.dispatcher as dispatcher:
        future = dispatcher.prompt(request, config.providers, callback)
        future.result()

    sys.exit(callback.exit_code if callback.exit_code is not None else EXIT_FAILED)


if __name__ == '__main__':  # pragma: no cover
    cli()
