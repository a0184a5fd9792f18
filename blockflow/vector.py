"""Fixed-length numeric vectors, decoupled from how they are stored.

Blocks only talk to VectorInterface. BasicVector keeps its values in one
contiguous numpy array; Subvector is a window into some other vector.
"""

import numpy as np

from blockflow import numeric

class VectorInterface:
	def size(self):
		raise NotImplementedError()

	def getValue(self):
		raise NotImplementedError()

	def getMutableValue(self):
		raise NotImplementedError()

	@property
	def dtype(self):
		return self.getValue().dtype

	def setValue(self, values):
		values = np.asarray(values)
		if values.shape != (self.size(),):
			raise ValueError(f"expected {self.size()} values, found shape {values.shape}")
		self.getMutableValue()[:] = values

	def __len__(self):
		return self.size()

	def __repr__(self):
		return f"{type(self).__name__}({self.getValue().tolist()})"

class BasicVector(VectorInterface):
	def __init__(self, length, dtype=None):
		self.data = np.zeros(length, dtype=numeric.resolveDtype(dtype))

	def make(values, dtype=None):
		values = np.asarray(values)
		if dtype is None and np.issubdtype(values.dtype, np.number):
			dtype = values.dtype
		result = BasicVector(len(values), dtype)
		result.setValue(values)
		return result

	def size(self):
		return self.data.shape[0]

	def getValue(self):
		view = self.data.view()
		view.flags.writeable = False
		return view

	def getMutableValue(self):
		return self.data

class Subvector(VectorInterface):
	def __init__(self, vector, start, length):
		if start < 0 or length < 0 or start + length > vector.size():
			raise IndexError(f"window [{start}, {start+length}) is outside a vector of size {vector.size()}")
		# not owned, the parent must outlive the window
		self.vector = vector
		self.start = start
		self.length = length

	def size(self):
		return self.length

	def getValue(self):
		return self.vector.getValue()[self.start:self.start+self.length]

	def getMutableValue(self):
		return self.vector.getMutableValue()[self.start:self.start+self.length]
