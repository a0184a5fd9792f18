import os
import logging

from blockflow import numeric

logger = logging.getLogger(__name__)

class Params:
	def __init__(self, prefix="PARAM_", defaults=None):
		if defaults is not None:
			for key, value in defaults.items():
				setattr(self, key, value)
		for key, value in os.environ.items():
			if key.startswith(prefix):
				attr = key[len(prefix):]
				setattr(self, attr, Params.parseEnv(value))
		logger.info("Test Parameters: " + str(self))

	def toDict(self):
		result = {}
		for key in dir(self):
			if key.startswith('_'):
				continue
			value = getattr(self, key)
			if callable(value):
				continue
			result[key] = value
		return result

	def __str__(self):
		return str(self.toDict())

	def parseEnv(value):
		try:
			return int(value)
		except ValueError:
			pass
		try:
			return float(value)
		except ValueError:
			pass
		if value.lower() in {"true", "false"}:
			return value.lower() == "true"
		return value

class Logger:
	def __init__(self, path="test.log"):
		self.path = path
		self.log = open(path, "w")
		self.msgs = []
		self.time = 0.0

	def info(self, msg):
		print(f"{self.time}\tinfo: {msg}", file=self.log)

	def check(self, cond, msg):
		if not cond:
			self.error(msg)

	def error(self, msg):
		self.msgs.append((self.time, msg))
		logger.error(msg)
		print(f"{self.time}\terror: {msg}", file=self.log)

	def warn(self, msg):
		logger.warning(msg)
		print(f"{self.time}\twarning: {msg}", file=self.log)

	def hasError(self):
		return len(self.msgs) > 0

	def close(self):
		self.log.close()

	def done(self):
		self.close()
		assert not self.hasError(), f"test failed with {len(self.msgs)} errors."

class Bench:
	def __init__(self, system, sources, model, log=None, timeStep=1.0, prec=20):
		self.system = system
		self.sources = sources
		self.model = model
		self.log = log
		self.timeStep = timeStep
		self.prec = prec

		self.context = system.createDefaultContext()
		self.output = system.createDefaultOutput()
		for i, src in enumerate(sources):
			self.context.bind(i, src.vector)

	def step(self):
		if self.log is not None:
			self.log.time = self.context.time

		for src in self.sources:
			src.cycle()

		self.system.output(self.context, self.output)
		result = self.output.getVector(0).getValue()
		expected = self.model.cycle([src.tokens[-1] for src in self.sources])

		if self.log is not None:
			self.log.info(f"{self.system.name}?{result.tolist()}")
			self.log.check(numeric.vectorsEqual(expected, result, self.prec),
				f"expected {list(expected)} found {result.tolist()} for {self.system.name}")

		self.context.time += self.timeStep
		return result

	def run(self, steps):
		logger.info(f"running {self.system.name} for {steps} steps")
		try:
			for _ in range(steps):
				self.step()
		finally:
			if self.log is not None:
				self.log.close()
		if self.log is not None:
			self.log.done()
