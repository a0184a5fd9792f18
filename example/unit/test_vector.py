import numpy as np
import pytest

from blockflow import numeric
from blockflow.vector import VectorInterface, BasicVector, Subvector

def test_basicVectorStartsAtZero():
	v = BasicVector(4)
	assert v.size() == len(v) == 4
	assert v.dtype == np.float64
	assert v.getValue().tolist() == [0.0]*4

def test_readOnlyView():
	v = BasicVector.make([1.0, 2.0])
	with pytest.raises(ValueError):
		v.getValue()[0] = 5.0

	v.getMutableValue()[0] = 5.0
	assert v.getValue().tolist() == [5.0, 2.0]

def test_setValueChecksLength():
	v = BasicVector(3)
	v.setValue([1, 2, 3])
	assert v.getValue().tolist() == [1.0, 2.0, 3.0]
	with pytest.raises(ValueError):
		v.setValue([1, 2])

def test_makeKeepsElementType():
	assert BasicVector.make([1, 2]).dtype.kind == "i"
	assert BasicVector.make([1, 2], dtype=np.float32).dtype == np.float32
	assert BasicVector.make([]).size() == 0

def test_nonNumericType():
	with pytest.raises(TypeError):
		BasicVector(2, dtype=str)

def test_subvectorWindow():
	parent = BasicVector.make([0.0, 1.0, 2.0, 3.0])
	window = Subvector(parent, 1, 2)
	assert window.size() == 2
	assert window.getValue().tolist() == [1.0, 2.0]

	window.setValue([10.0, 20.0])
	assert parent.getValue().tolist() == [0.0, 10.0, 20.0, 3.0]

	with pytest.raises(ValueError):
		window.getValue()[0] = 1.0

@pytest.mark.parametrize("start,length", [(-1, 2), (3, 2), (0, 5)])
def test_subvectorOutOfRange(start, length):
	with pytest.raises(IndexError):
		Subvector(BasicVector(4), start, length)

def test_abstractInterface():
	v = VectorInterface()
	with pytest.raises(NotImplementedError):
		v.size()
	with pytest.raises(NotImplementedError):
		v.getValue()
	with pytest.raises(NotImplementedError):
		v.getMutableValue()

def test_vectorsEqual():
	assert numeric.vectorsEqual([1.0, 2.0], np.array([1.0, 2.0]))
	assert numeric.vectorsEqual([1.0], [1.0 + 1e-9], prec=20)
	assert not numeric.vectorsEqual([1.0], [1.1], prec=5)
	assert not numeric.vectorsEqual([1.0], [1.0, 2.0])
	assert numeric.floatEqual(1.0, 1.01, 5)
