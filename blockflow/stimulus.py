import logging
import random

import numpy as np

from blockflow.vector import BasicVector

logger = logging.getLogger(__name__)

def randomInt(bounds, length=None):
	if length is not None:
		return [randomInt(bounds) for _ in range(length)]
	return random.randint(int(bounds[0]), int(bounds[1])-1)

def randomReal(bounds, length=None):
	if length is not None:
		return [randomReal(bounds) for _ in range(length)]
	return random.uniform(bounds[0], bounds[1])

class RandomInt:
	def __init__(self, bounds=(0,2), length=1):
		self.bounds = bounds
		self.length = length

	def next(self):
		return randomInt(self.bounds, self.length)

class RandomReal:
	def __init__(self, bounds=(0,1), length=1):
		self.bounds = bounds
		self.length = length

	def next(self):
		return randomReal(self.bounds, self.length)

class TokenList:
	def __init__(self, values=None):
		self.values = [[0]] if values is None else values
		self.index = 0

	def next(self):
		result = self.values[self.index]
		self.index = (self.index+1)%len(self.values)
		return result

class Source:
	def __init__(self, name, values=None, length=1, dtype=None, log=None):
		self.name = name
		self.values = RandomReal(length=length) if values is None else values

		# This is what gets bound into a context input port.
		self.vector = BasicVector(length, dtype)
		self.tokens = []

		# record tokens for verification later
		self.log = log

	def cycle(self):
		value = np.asarray(self.values.next(), dtype=self.vector.dtype)
		self.vector.setValue(value)
		self.tokens.append(value)
		if self.log is not None:
			self.log.info(f"{self.name}!{value.tolist()}")
		logger.debug(f"{self.name} produced {value.tolist()}")
		return value
