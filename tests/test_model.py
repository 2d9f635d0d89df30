import pytest

import dictlink


def test_database():

    database = dictlink.Database('wn', 'WordNet')
    assert database.name == 'wn'
    assert database.description == 'WordNet'
    assert database.special == False

    assert database == dictlink.Database('wn', 'WordNet')
    assert database != dictlink.Database('wn', 'Something else')
    assert hash(database) == hash(dictlink.Database('wn', 'WordNet'))

    with pytest.raises(AttributeError):
        database.name = 'gcide'


def test_special():

    assert dictlink.ALL.name == '*'
    assert dictlink.FIRST.name == '!'
    assert dictlink.ALL.special == True
    assert dictlink.FIRST.special == True
    assert dictlink.model.special['*'] is dictlink.ALL


def test_strategy():

    strategy = dictlink.MatchingStrategy('prefix', 'Match prefixes')
    assert strategy.name == 'prefix'
    assert strategy.description == 'Match prefixes'
    assert strategy == dictlink.MatchingStrategy('prefix', 'Match prefixes')

    # A strategy and a database with the same fields are different things.
    assert strategy != dictlink.Database('prefix', 'Match prefixes')

    with pytest.raises(AttributeError):
        strategy.description = 'changed'


def test_definition():

    database = dictlink.Database('wn', 'WordNet')
    definition = dictlink.Definition('cat', database)

    assert definition.word == 'cat'
    assert definition.database is database
    assert definition.lines == ()
    assert definition.frozen == False

    definition.append('cat')
    definition.append('    n 1: feline mammal')
    definition.freeze()

    assert definition.frozen == True
    assert definition.lines == ('cat', '    n 1: feline mammal')
    assert definition.body == 'cat\n    n 1: feline mammal'

    with pytest.raises(RuntimeError):
        definition.append('more')

    # Freezing twice is harmless.
    definition.freeze()
    assert len(definition.lines) == 2


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
