# -*- coding: utf-8 -*-

import unittest

from absl.testing import parameterized

import tensorfft as tf
from tensorfft.backend import RecordingBackend, Call

OPS = ['fft', 'ifft', 'rfft', 'irfft', 'hfft', 'ihfft']


class TestForwarding(parameterized.TestCase):
  def setUp(self):
    super().setUp()
    self.old_backend = tf.get_backend_name()
    self.recorder = RecordingBackend()
    tf.register_backend('recording', self.recorder)
    tf.switch_to('recording')

  def tearDown(self):
    tf.switch_to(self.old_backend)
    super().tearDown()

  @parameterized.parameters(*OPS)
  def test_defaults(self, op):
    x = object()
    getattr(tf.fft, op)(x)
    self.assertEqual(self.recorder.calls, [Call(op, x, None, -1, None)])
    self.assertIs(self.recorder.last_call.input, x)

  @parameterized.parameters(*OPS)
  def test_explicit(self, op):
    x = object()
    getattr(tf.fft, op)(x, 128, 0, 'ortho')
    self.assertEqual(self.recorder.last_call, Call(op, x, 128, 0, 'ortho'))

  @parameterized.parameters(*OPS)
  def test_returns_backend_result(self, op):
    self.recorder.result = result = object()
    self.assertIs(getattr(tf.fft, op)([1., 2.]), result)

  @parameterized.parameters(*OPS)
  def test_no_validation(self, op):
    x = object()
    getattr(tf.fft, op)(x, n=-3, dim=42, norm='unknown')
    self.assertEqual(self.recorder.last_call, Call(op, x, -3, 42, 'unknown'))

  @parameterized.parameters(*OPS)
  def test_error_is_propagated(self, op):
    error = IndexError('Dimension out of range')
    self.recorder.error = error
    with self.assertRaises(IndexError) as cm:
      getattr(tf.fft, op)(object(), dim=5)
    self.assertIs(cm.exception, error)
    self.assertEqual(len(self.recorder.calls), 1)

  def test_axis_alias(self):
    x = object()
    tf.fft.rfft(x, axis=1)
    self.assertEqual(self.recorder.last_call, Call('rfft', x, None, 1, None))

  def test_positional_dim_and_axis(self):
    with self.assertRaises(TypeError):
      tf.fft.fft(object(), None, 0, axis=1)
    self.assertEqual(self.recorder.calls, [])


class TestDispatch(unittest.TestCase):
  def test_injected_backend(self):
    recorder = RecordingBackend(result='canned')
    x = object()
    r = tf.fft.dispatch('hfft', x, tf.FFTOptions(n=8, norm='forward'), recorder)
    self.assertEqual(r, 'canned')
    self.assertEqual(recorder.calls, [Call('hfft', x, 8, -1, 'forward')])

  def test_unknown_op(self):
    recorder = RecordingBackend()
    with self.assertRaises(ValueError):
      tf.fft.dispatch('fft2', object(), tf.FFTOptions(), recorder)
    self.assertEqual(recorder.calls, [])


class TestFFTClass(parameterized.TestCase):
  @parameterized.parameters(*OPS)
  def test_instance_options(self, op):
    recorder = RecordingBackend()
    f = tf.FFT(recorder, tf.FFTOptions(n=16, dim=0, norm='ortho'))
    x = object()
    getattr(f, op)(x)
    self.assertEqual(recorder.last_call, Call(op, x, 16, 0, 'ortho'))

  @parameterized.parameters(*OPS)
  def test_call_overrides(self, op):
    recorder = RecordingBackend()
    f = tf.FFT(recorder, tf.FFTOptions(n=16, dim=0, norm='ortho'))
    x = object()
    getattr(f, op)(x, n=4, dim=-2, norm='forward')
    self.assertEqual(recorder.last_call, Call(op, x, 4, -2, 'forward'))

  def test_default_options(self):
    recorder = RecordingBackend()
    f = tf.FFT(recorder)
    x = object()
    f.ifft(x)
    self.assertEqual(recorder.last_call, Call('ifft', x, None, -1, None))
    self.assertIs(f.backend, recorder)

  def test_stateless(self):
    recorder = RecordingBackend()
    f = tf.FFT(recorder)
    f.fft(object(), n=4)
    f.fft(object())
    self.assertIsNone(recorder.last_call.n)
    self.assertEqual(f.options, tf.FFTOptions())

  @parameterized.parameters(*OPS)
  def test_explicit_none_resets_default(self, op):
    recorder = RecordingBackend()
    f = tf.FFT(recorder, tf.FFTOptions(n=16, dim=0, norm='ortho'))
    x = object()
    getattr(f, op)(x, n=None, norm=None)
    self.assertEqual(recorder.last_call, Call(op, x, None, 0, None))

  @parameterized.parameters(*OPS)
  def test_axis_alias(self, op):
    recorder = RecordingBackend()
    f = tf.FFT(recorder, tf.FFTOptions(dim=0))
    x = object()
    getattr(f, op)(x, axis=2)
    self.assertEqual(recorder.last_call, Call(op, x, None, 2, None))
    with self.assertRaises(TypeError):
      getattr(f, op)(x, dim=1, axis=2)
    self.assertEqual(len(recorder.calls), 1)

  def test_registered_name(self):
    recorder = RecordingBackend()
    tf.register_backend('recording-by-name', recorder)
    f = tf.FFT('recording-by-name')
    f.rfft(object())
    self.assertEqual(len(recorder.calls), 1)
    self.assertIn('recording-by-name', repr(f))


if __name__ == '__main__':
  unittest.main()
