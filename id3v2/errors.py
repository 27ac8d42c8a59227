# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

class Error(Exception): pass

class Warning(Error, UserWarning): pass

class FrameWarning(Warning): pass
class EmptyFrameWarning(FrameWarning): pass
class DuplicateFrameWarning(FrameWarning): pass
class UnsupportedFrameWarning(FrameWarning): pass

class TagWarning(Warning): pass

class MalformedHeaderError(Error, ValueError): pass
class UnsupportedFeatureError(Error): pass
class UnsupportedVersionError(Error): pass
class UnsupportedEncodingError(Error, ValueError): pass
class FrameError(Error, ValueError): pass
