"""Shared fixtures: a component script and stylesheet to wrap markup in."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from threadstyle.config import ThreadConfig

SCRIPT = """<script lang="ts">
  import Flexbox from '$lib/components/Flexbox/Flexbox.svelte';
  import Box from '../lib/components/Box/Box.svelte';
  let color = $state('aqua');
  let computedHeight = $state(200);
  let computedWidth = $derived(color === 'aqua' ? 200 : 100);
  let asdf = 'background-color: green;';
  let cs = { backgroundColor: 'purple' };
</script>"""

STYLE = """<style>
div {
  background-color: red;  
}
p {
  color: green;  
}
</style>"""


@pytest.fixture()
def config() -> ThreadConfig:
    return ThreadConfig(
        attribute_name="cs",
        element_names=frozenset({"Flexbox", "Box", "ScopedStyles"}),
    )


@pytest.fixture()
def wrap() -> Callable[[str], str]:
    """Surround markup with the component script and stylesheet."""

    def _wrap(markup: str) -> str:
        return SCRIPT + markup + STYLE

    return _wrap
