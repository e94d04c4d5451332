"""Escape-time evaluation and scanline rendering."""

from __future__ import annotations

import numpy as np
import tensorflow as tf

from .viewport import Viewport

INTERIOR = np.array([0, 0, 0], dtype=np.uint8)
EXTERIOR = np.array([255, 255, 255], dtype=np.uint8)


@tf.function
def _escape_step(zs: tf.Tensor, cs: tf.Tensor, ns: tf.Tensor, active: tf.Tensor, bailout: tf.Tensor) -> tuple[tf.Tensor, tf.Tensor, tf.Tensor]:
    """Advance ``z <- z^2 + c`` for the lanes that are still bounded."""

    zs = tf.where(active, zs * zs + cs, zs)
    ns = ns + tf.cast(active, tf.int32)
    active = tf.logical_and(active, tf.abs(zs) < bailout)
    return zs, ns, active


@tf.function
def _escape_run(cs: tf.Tensor, max_iterations: tf.Tensor, bailout: tf.Tensor) -> tf.Tensor:
    """Iterate every lane until it escapes or reaches ``max_iterations``."""

    i = tf.constant(0, dtype=tf.int32)
    zs = tf.zeros_like(cs)
    ns = tf.zeros(tf.shape(cs), dtype=tf.int32)
    active = tf.abs(zs) < bailout

    def cond(i: tf.Tensor, zs: tf.Tensor, ns: tf.Tensor, active: tf.Tensor) -> tf.Tensor:
        return tf.logical_and(tf.less(i, max_iterations), tf.reduce_any(active))

    def body(i: tf.Tensor, zs: tf.Tensor, ns: tf.Tensor, active: tf.Tensor) -> tuple[tf.Tensor, tf.Tensor, tf.Tensor, tf.Tensor]:
        zs, ns, active = _escape_step(zs, cs, ns, active, bailout)
        return i + 1, zs, ns, active

    _, _, ns, _ = tf.while_loop(cond, body, (i, zs, ns, active))
    return ns


def escape_counts(points: np.ndarray, max_iterations: int = 1000, bailout_radius: float = 2.0) -> np.ndarray:
    """Return the number of iterations each point survived before escaping."""

    points = np.atleast_1d(np.asarray(points, dtype=np.complex64))
    with tf.device("/CPU:0"):
        cs = tf.convert_to_tensor(points, dtype=tf.complex64)
        ns = _escape_run(
            cs,
            tf.constant(max_iterations, dtype=tf.int32),
            tf.constant(bailout_radius, dtype=tf.float32),
        )
    return ns.numpy()


def classify(c: complex, max_iterations: int = 1000, bailout_radius: float = 2.0) -> bool:
    """True when ``c`` stays bounded for ``max_iterations`` steps."""

    return bool(escape_counts(np.array([c]), max_iterations, bailout_radius)[0] >= max_iterations)


def render_row(y: int, viewport: Viewport, max_iterations: int = 1000, bailout_radius: float = 2.0) -> np.ndarray:
    """Render scanline ``y`` as a ``(width, 3)`` array of black/white pixels."""

    counts = escape_counts(viewport.row_to_complex(y), max_iterations, bailout_radius)
    inside = counts >= max_iterations
    return np.where(inside[:, np.newaxis], INTERIOR, EXTERIOR).astype(np.uint8)
