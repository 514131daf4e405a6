from __future__ import annotations

from collections.abc import Callable

import pytest

from xmlvalue.tree import Element, parse_node


@pytest.fixture
def xml() -> Callable[[str], Element]:
    """Return a parser turning an XML snippet into its root element."""
    return parse_node


@pytest.fixture
def settings_root() -> Element:
    """A small configuration-style document covering every lookup outcome."""
    return parse_node(
        "<settings>"
        "<name>primary</name>"
        "<retries>3</retries>"
        "<ratio>0.25</ratio>"
        "<verbose/>"
        "<debug>false</debug>"
        "<enabled>1</enabled>"
        "<mode>maybe</mode>"
        "<empty></empty>"
        "<server><host>db.local</host><port>5432</port><tls/></server>"
        "<server><host>backup.local</host><port>not-a-port</port></server>"
        "</settings>"
    )
