import json
import pathlib
from enum import Enum
from typing import Any, Callable, Optional, Type, TypeVar, Union

import click

from .errors import RangeNotSatisfiableError
from .log import LogLevels, configure_logging, logger
from .range import parse_range_header


_AnyCallable = Callable[..., Any]
FC = TypeVar('FC', bound=Union[_AnyCallable, click.Command])


class EnumType(click.Choice):
    def __init__(self, enum: Enum, case_sensitive=False) -> None:
        self.__enum = enum
        super().__init__(choices=[item.value for item in enum], case_sensitive=case_sensitive)

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> Enum:
        if value is None or isinstance(value, Enum):
            return value

        converted_str = super().convert(value, param, ctx)
        return self.__enum(converted_str)


def _pretty_print_default(value: Optional[bool]) -> Optional[str]:
    if isinstance(value, bool):
        return 'enabled' if value else 'disabled'
    if isinstance(value, Enum):
        return value.value
    return value


def option(*param_decls: str, cls: Optional[Type[click.Option]] = None, **attrs: Any) -> Callable[[FC], FC]:
    attrs['show_envvar'] = True
    if 'default' in attrs:
        attrs['show_default'] = _pretty_print_default(attrs['default'])
    return click.option(*param_decls, cls=cls, **attrs)


@click.group(context_settings={'show_default': True})
@option('--log/--no-log', 'log_enabled', default=True, help='Enable logging')
@option('--log-level', type=EnumType(LogLevels), default=LogLevels.info, help='Log level')
@option(
    '--log-config',
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=pathlib.Path),
    help='Logging configuration file (json)',
)
@click.version_option(package_name='byterange', message='%(prog)s %(version)s')
def cli(log_enabled: bool, log_level: LogLevels, log_config: Optional[pathlib.Path]) -> None:
    log_dictconfig = None
    if log_config:
        with log_config.open() as log_config_file:
            try:
                log_dictconfig = json.loads(log_config_file.read())
            except Exception:
                click.echo('Unable to parse provided logging config.', err=True)
                raise click.exceptions.Exit(1)

    configure_logging(log_level, log_dictconfig, log_enabled)


@cli.command('slice', help='Write the bytes of FILE selected by the RANGE header value.')
@click.argument(
    'file',
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=pathlib.Path),
)
@click.argument('range_header', metavar='RANGE')
@option(
    '--output',
    '-o',
    type=click.Path(file_okay=True, dir_okay=False, writable=True, path_type=pathlib.Path),
    help='Output file',
    show_default='stdout',
)
def slice_(file: pathlib.Path, range_header: str, output: Optional[pathlib.Path]) -> None:
    data = file.read_bytes()
    byte_range = parse_range_header(range_header)

    try:
        chunk = byte_range.apply(data)
    except RangeNotSatisfiableError as exc:
        logger.error('Cannot slice %s: %s', file, exc)
        raise click.exceptions.Exit(1)

    if content_range := byte_range.to_header_value(len(data)):
        click.echo(content_range, err=True)

    if output:
        output.write_bytes(chunk)
    else:
        with click.open_file('-', 'wb') as stdout:
            stdout.write(chunk)


@cli.command(help='Print the Content-Range value for the RANGE header value.')
@click.argument('range_header', metavar='RANGE')
@option('--length', type=click.IntRange(0), required=True, help='Total length of the resource')
def header(range_header: str, length: int) -> None:
    click.echo(parse_range_header(range_header).to_header_value(length))


def entrypoint():
    cli(auto_envvar_prefix='BYTERANGE')
