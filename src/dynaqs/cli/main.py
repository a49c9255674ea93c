import json

import click

from dynaqs import __version__
from dynaqs.constant import HOOK_AFTER, HOOK_BEFORE, HOOK_BETWEEN
from dynaqs.helper.qsutil import parse_query_string
from dynaqs.query import QueryStringParser


def parse_alias(ctx, param, values):
    aliases = {}
    for value in values:
        key, sep, target = value.partition('=')
        if not (sep and key and target):
            raise click.BadParameter(f'expected KEY=TARGET, got: {value}')
        aliases[key] = target

    return aliases


@click.group()
@click.version_option(version=__version__)
def cli():
    """Query string to document database filter translator."""
    pass


@cli.command()
@click.argument('query_string')
@click.option('--alias', '-a', multiple=True, callback=parse_alias, help='Rename a key, KEY=TARGET.')
@click.option('--whitelist', '-w', multiple=True, help='Only accept this key.')
@click.option('--blacklist', '-b', multiple=True, help='Reject this key.')
@click.option('--after', 'after_field', help='Field set by the "after" date parameter.')
@click.option('--before', 'before_field', help='Field set by the "before" date parameter.')
@click.option('--between', 'between_field', help='Field set by the "between" date parameter.')
@click.option('--no-boolean', is_flag=True, help='Keep "true" / "false" as strings.')
@click.option('--no-number', is_flag=True, help='Keep numbers as strings.')
@click.option('--no-group', is_flag=True, help='Repeated keys: keep the last value instead of a list.')
@click.option('--indent', type=int, default=None, help='JSON indentation.')
def parse(query_string, alias, whitelist, blacklist, after_field, before_field, between_field,
          no_boolean, no_number, no_group, indent):
    """Print the filter of QUERY_STRING as JSON, e.g. 'age=>=18&tags[]=a'."""
    custom = {
        name: field
        for name, field in ((HOOK_AFTER, after_field), (HOOK_BEFORE, before_field), (HOOK_BETWEEN, between_field))
        if field
    }

    parser = QueryStringParser(
        alias=alias,
        whitelist=whitelist,
        blacklist=blacklist,
        custom=custom,
        to_boolean=not no_boolean,
        to_number=not no_number,
    )

    query = parse_query_string(query_string, group_repeated=not no_group)
    click.echo(json.dumps(parser.parse(query), indent=indent, ensure_ascii=False))


if __name__ == '__main__':
    cli()
