import logging

import numpy as np

from blockflow import errors
from blockflow import numeric
from blockflow.system import System, Context, SystemOutput, OutputPort
from blockflow.vector import BasicVector

log = logging.getLogger(__name__)

class Adder(System):
	"""Sums a fixed number of equal-length vector inputs into one output.

	Both numInputs and length are fixed at construction. The single output
	port is reset to zero at the start of every evaluation, so a failed
	evaluation leaves it zeroed rather than holding the previous sum.
	"""

	def __init__(self, numInputs, length, dtype=None, name="adder"):
		super().__init__(name)
		self.numInputs = numInputs
		self.length = length
		self.dtype = numeric.resolveDtype(dtype)

	def createDefaultContext(self):
		return Context(self.numInputs)

	def createDefaultOutput(self):
		# An adder has just one output port, sized at construction time.
		output = SystemOutput()
		output.outputPorts.append(OutputPort(BasicVector(self.length, self.dtype)))
		log.debug(f"{self.name}: allocated output of length {self.length}")
		return output

	def output(self, context, output):
		# Checks on the output structure are invariants, not wiring errors.
		# They only run in debug builds and are stripped under python -O.
		if __debug__:
			errors.invariant(output.getNumOutputPorts() == 1,
				f"{self.name} expected 1 output port, found {output.getNumOutputPorts()}")
			errors.invariant(output.getVector(0) is not None,
				f"{self.name} output port 0 holds no vector")
			errors.invariant(output.getVector(0).size() == self.length,
				f"{self.name} output port 0 has size {output.getVector(0).size()}, expected {self.length}")

		result = output.getVector(0).getMutableValue()
		result.fill(0)

		if context.getNumInputPorts() != self.numInputs:
			log.warning(f"{self.name}: expected {self.numInputs} input ports, found {context.getNumInputPorts()}")
			raise errors.PortCountMismatch(self.numInputs, context.getNumInputPorts())

		for i, port in enumerate(context.inputPorts):
			if not port.isBound() or port.input.size() != self.length:
				log.warning(f"{self.name}: input port {i} is unbound or mis-sized")
				raise errors.BadInputPort(i)

		# written only once the whole sum is built, so a failure leaves it zeroed
		total = np.zeros_like(result)
		for port in context.inputPorts:
			np.add(total, port.input.getValue(), out=total)
		result[:] = total
