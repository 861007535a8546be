__version__ = '0.1.0'

# Decode the undocumented binary payloads sent by wearable fitness devices.
#
# Each payload family lives in its own sub-package:
#
#     + huami     activity summary records (versioned layouts)
#     + settings  device settings sent as a current value plus support mask
