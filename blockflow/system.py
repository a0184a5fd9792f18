class InputPort:
	def __init__(self, vector=None):
		# Borrowed, usually from another block's output. Never owned here.
		self.input = vector

	def isBound(self):
		return self.input is not None

	def bind(self, vector):
		self.input = vector

	def unbind(self):
		self.input = None

class OutputPort:
	def __init__(self, vector=None):
		self.output = vector

class Context:
	def __init__(self, numInputs=0, time=0.0):
		self.time = time
		self.inputPorts = [InputPort() for _ in range(numInputs)]

	def getNumInputPorts(self):
		return len(self.inputPorts)

	def bind(self, index, vector):
		self.inputPorts[index].bind(vector)

	def getInput(self, index):
		return self.inputPorts[index].input

class SystemOutput:
	def __init__(self):
		self.outputPorts = []

	def getNumOutputPorts(self):
		return len(self.outputPorts)

	def getVector(self, index):
		return self.outputPorts[index].output

class System:
	def __init__(self, name=None):
		self.name = type(self).__name__.lower() if name is None else name

	def createDefaultContext(self):
		raise NotImplementedError()

	def createDefaultOutput(self):
		raise NotImplementedError()

	# must write every output port from the context's bound inputs
	def output(self, context, output):
		raise NotImplementedError()
