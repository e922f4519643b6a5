"""
Client code that works with trees only through the Component interface.
"""

import logging
from collections.abc import Callable

from compositetree.config import ReportConfig
from compositetree.core import Component

logger = logging.getLogger(__name__)


class Client:
    """
    Caller that renders and extends trees without knowing concrete node types.

    Params:
        config: Reporting settings, defaults to ReportConfig()
        output: Callable receiving each report line, defaults to print
    """

    def __init__(
        self,
        config: ReportConfig | None = None,
        output: Callable[[str], None] = print,
    ):
        self.config = config or ReportConfig()
        self.output = output

    def report(self, result: str) -> None:
        self.output(self.config.format_result(result))

    def code_client_simple(self, component: Component) -> str:
        """
        Render any component, simple or composite, and report the result.

        Params:
            component: Root of the tree to render

        Returns:
            The component's operation() result
        """
        result = component.operation()
        self.report(result)
        return result

    def code_client_managing(self, component1: Component, component2: Component) -> str:
        """
        Attach component2 to component1 when it can hold children, then report.

        The capability check keeps the client independent of concrete classes:
        a non-composite component1 is rendered unchanged.

        Params:
            component1: Node that may receive the new child
            component2: Node to attach

        Returns:
            component1's operation() result after the optional attachment
        """
        if component1.is_composite():
            component1.add(component2)
        else:
            logger.debug(
                "%s cannot hold children, skipping add",
                type(component1).__name__,
            )

        result = component1.operation()
        self.report(result)
        return result
