"""Line-based pixel processing: formats, ring buffers, pipeline operations and argument parsing."""

__version__ = "0.1.0"