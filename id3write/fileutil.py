# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Stream manipulation utilities."""

import io

from contextlib import contextmanager

from id3write.errors import *

@contextmanager
def opened(filename, mode):
    "Open filename, or do nothing if filename is already an open file object"
    if isinstance(filename, str):
        file = open(filename, mode)
        try: 
            yield file
        finally: 
            if not file.closed:
                file.close()
    else:
        yield filename

@contextmanager
def scratch_buffer():
    """Provide a disposable in-memory byte buffer.

    The buffer is released when the context exits, whether or not the body
    raised.  Running out of memory while allocating or filling the buffer
    is reported as ResourceExhaustedError.
    """
    try:
        buffer = io.BytesIO()
    except MemoryError as e:
        raise ResourceExhaustedError("Cannot allocate scratch buffer") from e
    try:
        yield buffer
    except MemoryError as e:
        raise ResourceExhaustedError("Scratch buffer exhausted") from e
    finally:
        buffer.close()

def is_seekable(file):
    "Return true if file supports random access."
    seekable = getattr(file, "seekable", None)
    if seekable is None:
        return False
    try:
        return seekable()
    except ValueError: # closed file
        return False

def checked_write(file, data):
    "Write all of data to file; raise WriteError if the stream refuses it."
    try:
        written = file.write(data)
    except OSError as e:
        raise WriteError("Cannot write {0} bytes: {1}".format(len(data), e)) from e
    if written is not None and written != len(data):
        raise WriteError("Short write: {0} of {1} bytes".format(written, len(data)))
    return len(data)

def checked_seek(file, offset):
    "Seek file to the absolute position offset; raise SeekError on failure."
    try:
        pos = file.seek(offset)
    except OSError as e:
        raise SeekError("Cannot seek to offset {0}: {1}".format(offset, e)) from e
    if pos is not None and pos != offset:
        raise SeekError("Seek to offset {0} ended at {1}".format(offset, pos))
    return offset

def checked_tell(file):
    "Return the current position of file; raise SeekError on failure."
    try:
        return file.tell()
    except OSError as e:
        raise SeekError("Cannot determine stream position: {0}".format(e)) from e
