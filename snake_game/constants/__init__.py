from .headings import Heading
from .input_types import InputType
from .loop_states import LoopState
