from zeus.types.lambda_fn import Lambda
from zeus.types.environment import Environment


class TailCall:
    """A Lambda application deferred to the evaluator's trampoline."""

    __slots__ = ("fn", "env")

    def __init__(self, fn: Lambda, env: Environment):
        self.fn = fn
        self.env = env
