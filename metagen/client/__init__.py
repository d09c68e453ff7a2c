"""Client side of metagen: compose a request and render the streamed answer."""
from metagen.client.composer import Composer, Submission
from metagen.client.display import DisplayBuffer, strip_code_fences

__all__ = ["Composer", "Submission", "DisplayBuffer", "strip_code_fences"]
