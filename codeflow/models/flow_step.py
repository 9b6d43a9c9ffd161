"""
Flow steps: the animation script handed to the renderer

The renderer plays steps strictly in list order, one at a time.
"""
import json
from dataclasses import asdict, dataclass, field
from typing import List


@dataclass
class FlowStep:
    """Base class for all steps; ``type`` is the renderer's tag"""
    type = 'step'

    def to_dict(self):
        data = {'type': self.type}
        data.update(asdict(self))
        return data


@dataclass
class HighlightDefinition(FlowStep):
    file: str
    func: str
    type = 'highlight-def'


@dataclass
class HighlightCall(FlowStep):
    """A line holding a call is being executed"""
    file: str
    line: int
    type = 'highlight-call'


@dataclass
class HighlightLine(FlowStep):
    """A plain line (no calls) is being executed"""
    file: str
    line: int
    type = 'highlight-line'


@dataclass
class HighlightReturn(FlowStep):
    file: str
    lines: List[int] = field(default_factory=list)
    type = 'highlight-return'


@dataclass
class HighlightEndpoint(FlowStep):
    file: str
    line: int
    type = 'highlight-endpoint'


@dataclass
class AnimateCallEdge(FlowStep):
    """Edge from a call site to the called function's definition"""
    from_file: str
    to_file: str
    from_line: int
    to_func: str
    type = 'animate-edge'


@dataclass
class AnimateReturnEdge(FlowStep):
    """Edge from a returning function back to its call site"""
    from_file: str
    to_file: str
    from_func: str
    to_line: int
    type = 'return-edge'


def flow_steps_to_json(steps, indent=None):
    """Serialize a step list for the renderer"""
    return json.dumps([step.to_dict() for step in steps], indent=indent)
