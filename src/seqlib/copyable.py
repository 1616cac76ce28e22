# This source code is part of the Seqlib package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "seqlib"
__author__ = "The Seqlib contributors"
__all__ = ["Copyable"]

import abc


class Copyable(metaclass=abc.ABCMeta):
    """
    Base class for all objects, that can be copied into an independent
    object, like a :class:`Seq` or a :class:`SmallMutation`.

    The public method `copy()` first creates a fresh instance via
    `__copy_create__()`.
    Afterwards `__copy_fill__()` copies everything the constructor did
    not already set, e.g. the sequence code of a :class:`Seq`.
    No storage is shared between the original and the copy.
    """

    def copy(self):
        """
        Copy the object.

        Returns
        -------
        copy
            An independent copy of this object.
        """
        clone = self.__copy_create__()
        self.__copy_fill__(clone)
        return clone

    @abc.abstractmethod
    def __copy_create__(self):
        """
        Instantiate a new object of this class.

        Only the constructor should be called in this method.
        All further attributes, that need to be copied are handled
        in `__copy_fill__()`.

        Returns
        -------
        copy
            A freshly instantiated copy of *self*.
        """
        pass

    def __copy_fill__(self, clone):
        """
        Copy all attributes, that were not set by `__copy_create__()`,
        to the new object.

        Always call the `super()` method as first statement.

        Parameters
        ----------
        clone
            The freshly instantiated copy of *self*.
        """
        pass
