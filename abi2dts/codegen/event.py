"""
Event generation for web3.js contract declarations.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from .function import FunctionGenerator

from .base import BaseGenerator
from ..parser.ast_nodes import EventDeclaration


# Subscription function type parameterized by the decoded payload
EVENT_SUBSCRIPTION_TYPE = 'ContractEvent'

# Member present on every contract regardless of its events
ALL_EVENTS_MEMBER = [
    'allEvents: (',
    '  options?: EventOptions,',
    '  cb?: Callback<EventLog>',
    ') => EventEmitter;',
]


class EventGenerator(BaseGenerator):
    """Generates members of the ``events`` block."""

    def __init__(self, ctx: 'CodeGenerationContext', func_generator: 'FunctionGenerator'):
        super().__init__(ctx)
        self._func = func_generator

    def generate_event(self, event: EventDeclaration) -> str:
        """Render ``Name: ContractEvent<payload>;``.

        Event fields are decoded off a log, so the payload uses the output
        mapping and the same by-name and by-position shape as call results.
        """
        payload = self._func.generate_output_types(event.inputs)
        return f'{event.name}: {EVENT_SUBSCRIPTION_TYPE}<{payload}>;'

    def generate_all_events(self) -> str:
        """Render the fixed ``allEvents`` member at the current indentation."""
        return '\n'.join(f'{self.indent()}{line}' for line in ALL_EVENTS_MEMBER)
