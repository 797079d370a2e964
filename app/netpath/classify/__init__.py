"""Mapping of mounts and filesystems onto the path taxonomy."""

from netpath.classify.classifier import DeviceClassifier
from netpath.classify.magic import MagicClassifier
from netpath.classify.sysfs import read_removable_flag

__all__ = ["DeviceClassifier", "MagicClassifier", "read_removable_flag"]
