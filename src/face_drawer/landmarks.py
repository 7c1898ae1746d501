__all__ = ["DEFAULT_LANDMARKS", "LandmarkSource", "StaticLandmarkSource", "H5LandmarkSource"]

from pathlib import Path
from typing import Mapping, Union

import h5py

from .exceptions import LandmarksUnavailable
from .logging_utils import get_logger

logger = get_logger(__name__)

# 68 facial landmarks of a single reference face, in the point list grammar
DEFAULT_LANDMARKS = (
    "260.040343 888.611127,269.976639 986.237354,289.517197 1083.266163,318.881451 1173.145982,"
    "364.546544 1250.371343,418.218724 1309.539448,461.121964 1353.916568,504.180831 1384.225729,"
    "559.618409 1388.323818,621.603966 1370.890055,679.025618 1321.635214,733.523399 1257.153803,"
    "774.329893 1186.295180,799.438576 1104.623734,808.253363 1017.840100,812.229479 928.171773,"
    "811.221769 840.187872,284.726667 848.636778,314.568856 809.799045,363.772096 799.441036,"
    "415.291389 808.526863,460.919328 829.631910,583.462146 820.953046,636.755684 795.958497,"
    "691.394963 783.182439,743.891658 792.415951,775.381131 828.681755,529.630091 906.442344,"
    "529.574225 967.086822,530.012695 1026.679804,531.292755 1086.990969,467.638977 1106.164622,"
    "501.108780 1119.289102,536.497121 1129.913266,572.325308 1114.384652,604.607400 1099.128276,"
    "343.791704 920.670122,376.535971 906.083111,416.491883 907.205085,450.937132 925.887388,"
    "414.741360 935.063918,374.592095 935.758863,608.171787 919.124603,644.627460 896.407367,"
    "685.007219 893.673088,717.802710 903.722484,689.087399 921.081659,648.842417 925.134424,"
    "428.372733 1189.689410,468.256940 1173.033265,509.813908 1166.325831,544.873064 1173.577640,"
    "584.582054 1162.312021,632.018411 1162.765017,673.808561 1169.648399,637.463043 1224.757898,"
    "593.982270 1254.679665,550.961616 1263.246796,512.593977 1260.883046,468.722179 1238.307145,"
    "444.941818 1193.994500,511.391420 1191.338850,546.770070 1193.972674,587.503078 1186.534614,"
    "655.700551 1176.627786,590.680093 1215.187488,549.193046 1223.938076,512.354186 1220.627523"
)


class LandmarkSource:
    """Supplies the coordinate string of a frame."""

    def get(self, frame_id: int) -> str:
        raise NotImplementedError


class StaticLandmarkSource(LandmarkSource):
    """Returns the same coordinate string for every frame."""

    def __init__(self, text: str = DEFAULT_LANDMARKS) -> None:
        if not isinstance(text, str):
            raise TypeError("text must be a string")
        self.text = text

    def get(self, frame_id: int) -> str:
        return self.text


class H5LandmarkSource(LandmarkSource):
    """Landmark store kept in an HDF5 file.

    Every frame is a variable length string dataset ``<group>/<frame_id>``
    holding the coordinate string. The file is opened for each lookup and
    closed right after, so the store can be refreshed between frames.

    Args:
        path (Union[str, Path]): The HDF5 file
        group (str, optional): Group holding the frame datasets. Defaults to "landmarks".
    """

    def __init__(self, path: Union[str, Path], group: str = "landmarks") -> None:
        self.path = Path(path)
        self.group = group

    def __repr__(self) -> str:
        return f"H5LandmarkSource({str(self.path)!r}, group={self.group!r})"

    def get(self, frame_id: int) -> str:
        """Read the coordinate string of a frame.

        Raises:
            LandmarksUnavailable: If the file, the group or the frame is missing

        Returns:
            str: The coordinate string
        """
        key = f"{self.group}/{int(frame_id)}"
        try:
            with h5py.File(self.path, "r") as data_file:
                dataset = data_file[key]
                value = dataset.asstr()[()] if dataset.dtype.kind == "O" else dataset[()]
            if isinstance(value, bytes):
                value = value.decode("utf-8")
        except (OSError, KeyError, UnicodeDecodeError) as e:
            raise LandmarksUnavailable(frame_id, self, cause=e) from e

        if not isinstance(value, str):
            raise LandmarksUnavailable(frame_id, self, cause=TypeError(f"{key} is not a string dataset"))
        logger.debug("Read landmarks of frame %d from %s", frame_id, self.path)
        return value

    @staticmethod
    def write(path: Union[str, Path], frames: Mapping[int, str], group: str = "landmarks") -> "H5LandmarkSource":
        """Create or extend a landmark store with coordinate strings per frame."""
        with h5py.File(path, "a") as data_file:
            root = data_file.require_group(group)
            for frame_id, text in frames.items():
                name = str(int(frame_id))
                if name in root:
                    del root[name]
                root.create_dataset(name, data=text, dtype=h5py.string_dtype())
        return H5LandmarkSource(path, group=group)
