# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

class Error(Exception): pass

class Warning(Error, UserWarning): pass

class EncodingFallbackWarning(Warning): pass
class TagWarning(Warning): pass

class TagError(Error, ValueError): pass
class FrameError(Error, ValueError): pass
class ResourceExhaustedError(Error, MemoryError): pass

class StreamError(Error, OSError): pass
class WriteError(StreamError): pass
class SeekError(StreamError): pass
