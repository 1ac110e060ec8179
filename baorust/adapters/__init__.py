"""Namespace for framework adapters; it holds no modules at present."""