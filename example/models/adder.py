class Model:
	def __init__(self, numInputs, length, log=None):
		self.numInputs = numInputs
		self.length = length

		# Internal state (none needed for pure adder)
		self.log = log

	def cycle(self, inputs):
		result = [0]*self.length
		for value in inputs:
			for j in range(self.length):
				result[j] += value[j]
		return result
