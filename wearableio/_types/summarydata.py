#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Many decoded summaries side by side, one row each.

"""
from pandas import DataFrame, DatetimeIndex

from wearableio._util import exceptions


class DataFrameSubclass(DataFrame):
    _metadata = []

    @property
    def _constructor(self):
        return self.__class__

    def __finalize__(self, other, method=None, **kwargs):
        """Propagate metadata from other to self."""
        for name in self._metadata:
            object.__setattr__(self, name, getattr(other, name, None))
        return self


class SummaryData(DataFrameSubclass):
    """Rows are summaries (indexed by start time), columns are fields.

    Fields a summary didn't report are NaN. Units for the summary field
    columns live in the `units` metadata dict.
    """
    _metadata = ['units']

    @property
    def duration(self):
        return self._try_get('end') - self.index.to_series()

    def unit(self, column):
        try:
            return (self.units or {})[column]
        except KeyError as e:
            raise exceptions.WearableIOError(
                '%r is not a summary field column' % column) from e

    def of_kind(self, kind):
        """Only the summaries of one `ActivityKind`."""
        return self[self._try_get('activity_kind') == kind.value]

    # Private methods
    # ---------------
    def _finish_up(self, *, units):
        """A pseudo-init method, used internally."""
        self.units = units
        if 'start' in self:
            self.index = DatetimeIndex(self.pop('start'), name='start')

        # Fields nobody reported are not worth a column.
        self.dropna(axis=1, how='all', inplace=True)

    def _try_get(self, key):
        """Try and get a required column from the data."""
        try:
            return self[key]
        except KeyError as e:
            raise exceptions.WearableIOError(
                '%r column not found' % key) from e
