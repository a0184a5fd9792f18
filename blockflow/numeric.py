import numpy as np

def resolveDtype(dtype):
	if dtype is None:
		return np.dtype(np.float64)
	result = np.dtype(dtype)
	if not np.issubdtype(result, np.number):
		raise TypeError(f"expected a numeric element type, found {result}")
	return result

def floatStep(prec):
	return (0.5**prec)

def floatEqual(v0, v1, prec):
	return abs(v0 - v1) <= floatStep(prec)

def vectorsEqual(v0, v1, prec=20):
	v0 = np.asarray(v0)
	v1 = np.asarray(v1)
	if v0.shape != v1.shape:
		return False
	return bool(np.all(floatEqual(v0, v1, prec)))
