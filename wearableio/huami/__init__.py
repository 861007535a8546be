"""
Decode the activity summaries sent by Huami (Amazfit / Mi Band) devices.

A summary is a small little-endian record fetched once an activity has been
synced. Its layout was worked out by the Gadgetbridge project [1]_ and
depends on two things found at the start of the record: a layout version
and the kind of activity. Several groups of bytes are still not understood
and are skipped over.

Use ``decode`` for a single summary or ``read`` for a whole batch as a
`pandas.DataFrame` subclass.


.. [1] https://codeberg.org/Freeyourgadget/Gadgetbridge

"""
from wearableio.huami._reading import read_and_format as read
from wearableio.huami._reading import decode, gen_records, swim_style_name
