"""Namespace for project file renderers; it holds no modules at present."""