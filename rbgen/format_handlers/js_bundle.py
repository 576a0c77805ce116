#!/usr/bin/env python3
"""
JavaScript bundle format.

Produces a minimal loadable script that assigns the bundle to a variable,
so it can be dropped in a <script> tag without a loader.
"""

from typing import Optional

from .base import BundleFormat, Messages
from .json_bundle import dump_messages

DEFAULT_JS_VARIABLE = "MESSAGES"


class JsBundleFormat(BundleFormat):
    """
    Bundle format for script-embeddable resource bundles.

    Output looks like:
    ```js
    MESSAGES = {"greeting":"Bonjour"};
    ```
    """

    @property
    def name(self) -> str:
        return "js"

    @property
    def file_extension(self) -> str:
        return "js"

    @property
    def description(self) -> str:
        return "JavaScript assigning the bundle to a variable"

    def render(self, messages: Messages, variable_name: Optional[str] = None) -> str:
        variable = variable_name or DEFAULT_JS_VARIABLE
        return f"{variable} = {dump_messages(messages)};"
