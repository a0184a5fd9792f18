import logging

log = logging.getLogger(__name__)

# Raised only from debug builds. These flag a bug in a block's own
# allocation code, never a wiring mistake.
class InternalInvariantViolation(AssertionError):
	pass

def invariant(cond, msg):
	if not cond:
		log.error(f"invariant violated: {msg}")
		raise InternalInvariantViolation(msg)

class ConfigurationError(RuntimeError):
	pass

class PortCountMismatch(ConfigurationError):
	def __init__(self, expected, actual):
		super().__init__(f"expected {expected} input ports, but had {actual}")
		self.expected = expected
		self.actual = actual

class BadInputPort(ConfigurationError):
	def __init__(self, index):
		super().__init__(f"input port {index} is unbound or has incorrect size")
		self.index = index
