""" Generic odds and ends which have nothing in particular to do with JSON. """


class Visitor:
	"""
	Visitor-pattern in Python, with fall-back to superclasses along the MRO.

	A subclass defines `visit_Foo` methods for the classes it cares about. Each such method
	decides for itself which parts of the host to `self.visit(...)` next, and in what order.
	If there is no method for the host's exact class, the nearest ancestor with one gets the call.
	The resolution is remembered per class, since trees tend to contain a great many of the same thing.
	"""

	def visit(self, host, *args, **kwargs):
		cls = host.__class__
		try: name = self.__resolved[cls]
		except AttributeError:
			self.__resolved = {}
			name = self.__resolve(cls)
		except KeyError: name = self.__resolve(cls)
		return getattr(self, name)(host, *args, **kwargs)

	def __resolve(self, cls):
		for each in cls.__mro__:
			name = 'visit_' + each.__name__
			if hasattr(self, name):
				self.__resolved[cls] = name
				return name
		raise AttributeError("%s has no visit method for %s" % (type(self).__name__, cls.__name__))
