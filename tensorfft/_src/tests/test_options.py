# -*- coding: utf-8 -*-

import unittest

import tensorfft as tf


class TestFFTOptions(unittest.TestCase):
  def test_defaults(self):
    opts = tf.FFTOptions()
    self.assertIsNone(opts.n)
    self.assertEqual(opts.dim, -1)
    self.assertEqual(opts.dim, tf.fft.DEFAULT_DIM)
    self.assertIsNone(opts.norm)

  def test_of(self):
    self.assertEqual(tf.FFTOptions.of(8, 0, 'ortho'), tf.FFTOptions(n=8, dim=0, norm='ortho'))

  def test_replace(self):
    opts = tf.FFTOptions(n=8)
    new = opts.replace(norm='forward')
    self.assertEqual(new, tf.FFTOptions(n=8, norm='forward'))
    self.assertEqual(opts, tf.FFTOptions(n=8))

  def test_as_kwargs(self):
    self.assertEqual(tf.FFTOptions().as_kwargs(), {'n': None, 'dim': -1, 'norm': None})
    self.assertEqual(tf.FFTOptions(3, 1, 'ortho').as_kwargs(), {'n': 3, 'dim': 1, 'norm': 'ortho'})

  def test_no_validation(self):
    opts = tf.FFTOptions(n=0, dim=100, norm='whatever')
    self.assertEqual(opts.as_kwargs(), {'n': 0, 'dim': 100, 'norm': 'whatever'})

  def test_norm_modes(self):
    self.assertEqual(tf.fft.NORM_MODES, ('backward', 'ortho', 'forward'))


if __name__ == '__main__':
  unittest.main()
