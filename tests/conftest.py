"""
Shared test fixtures for the compositetree test suite.
"""

import pytest

from compositetree import Client, Composite, Leaf


@pytest.fixture
def sample_tree():
    """Tree rendered as Branch(Branch(Leaf+Leaf)+Branch(Leaf))."""
    return Composite(
        children=[
            Composite(children=[Leaf(), Leaf()]),
            Composite(children=[Leaf()]),
        ]
    )


@pytest.fixture
def report_lines():
    """List collecting every line a client reports."""
    return []


@pytest.fixture
def client(report_lines):
    """Client whose output is appended to report_lines instead of printed."""
    return Client(output=report_lines.append)
