"""
Tests for GraphQL operation name extraction used in request logging
"""

import pytest

from bookshelf.middleware import operation_name_from_payload


@pytest.mark.parametrize(
    "payload,expected",
    [
        ({"operationName": "AddBook", "query": "mutation AddBook { x }"}, "AddBook"),
        ({"query": "query Books { books { id } }"}, "Books"),
        ({"query": "mutation AddNote { addNote { id } }"}, "mutation:AddNote"),
        ({"query": "{ books { id } }"}, "unnamed_operation"),
        ({"query": 'mutation { removeBook(name: "x") { id } }'}, "mutation:unnamed_operation"),
        (
            {"query": 'mutation { addNote(title: "query Secret", description: "x") { id } }'},
            "mutation:unnamed_operation",
        ),
        ({"query": '{ books(name: "mutation Leak") { id } }'}, "unnamed_operation"),
        ({"query": '# query Hidden\n{ notes { id } }'}, "unnamed_operation"),
        (
            {"query": '{ note(title: """query Block""") { id } } query Named { notes { id } }'},
            "Named",
        ),
        ({"query": "query IntrospectionQuery { __schema { types { name } } }"}, "__introspection"),
        ({"query": ""}, None),
        ({}, None),
    ],
)
def test_operation_name_from_payload(payload, expected):
    assert operation_name_from_payload(payload) == expected
