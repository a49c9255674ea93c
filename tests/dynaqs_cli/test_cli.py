import json

from click.testing import CliRunner

from dynaqs import __version__
from dynaqs.cli import cli
from dynaqs.helper.qsutil import parse_query_string


def invoke(*args):
    result = CliRunner().invoke(cli, ['parse', *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


def test_parse_query_string():
    assert parse_query_string('?a=1&t[]=x&t[]=y&e=') == {'a': '1', 't[]': ['x', 'y'], 'e': ''}
    assert parse_query_string('b=1&b=2', group_repeated=False) == {'b': '2'}


def test_parse():
    assert invoke('age=>=18&tags[]=a&tags[]=!b&name=^jo') == {
        'age': {'ge': 18},
        'tags': {'in': ['a'], 'not_contains': ['b']},
        'name': {'begins_with': 'jo'},
    }


def test_parse_options():
    assert invoke('n=5&flag=true', '--alias', 'n=num', '--no-number', '--no-boolean') == {
        'num': '5',
        'flag': 'true',
    }
    assert invoke('a=1&b=2&c=3', '-w', 'a', '-w', 'b', '-b', 'b') == {'a': 1}
    assert invoke('s=x&s=y', '--no-group') == {'s': 'y'}


def test_parse_date_hooks():
    assert invoke('after=1609459200&between=bad|bad', '--after', 'created', '--between', 'range') == {
        'created': {'ge': '2021-01-01T00:00:00.000Z'},
    }


def test_invalid_alias():
    result = CliRunner().invoke(cli, ['parse', 'a=1', '--alias', 'broken'])
    assert result.exit_code == 2


def test_version():
    result = CliRunner().invoke(cli, ['--version'])
    assert __version__ in result.output
