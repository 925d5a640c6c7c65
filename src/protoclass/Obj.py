#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

class Obj:
    """Base class for the runtime's own objects (tables, classes, logs).

    Equality is identity. Each object draws a sequence number the first
    time it is hashed or printed, so 'Klass@3' names one class for the
    life of the process.
    """

    _counter = 0

    def equals(self, that):
        return self is that

    def hash(self):
        seq = self.__dict__.get("_seq")
        if seq is None:
            Obj._counter += 1
            seq = self.__dict__["_seq"] = Obj._counter
        return seq

    def to_str(self):
        return f"{type(self).__name__}@{self.hash()}"

    def __str__(self):
        return self.to_str()

    def __repr__(self):
        return self.to_str()

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return self.hash()
