"""Gallery interaction state for the detail media panel."""

from dataclasses import dataclass

from storefront.schemas.views import GalleryItem, GalleryView


@dataclass
class GalleryState:
    """What the detail page media panel currently shows.

    Exactly one of the main image and the video is visible. Only the
    video can be playing, and only while it is visible.
    """

    items: list[GalleryItem]
    active_index: int | None
    image_src: str
    video_src: str | None = None
    image_visible: bool = True
    video_visible: bool = False
    video_playing: bool = False

    @classmethod
    def from_view(cls, gallery: GalleryView, main_image: str) -> "GalleryState":
        """Initial state: main image shown, video hidden and paused."""
        return cls(
            items=list(gallery.items),
            active_index=gallery.active_index,
            image_src=main_image,
        )

    def select(self, index: int) -> GalleryItem:
        """Switch the displayed media to a thumbnail.

        Selecting the video shows it and starts playback; selecting an
        image pauses and hides the video first.

        Raises:
            IndexError: If index does not name a gallery item
        """
        if not 0 <= index < len(self.items):
            raise IndexError(f"Gallery has no item {index}")

        item = self.items[index]
        if item.kind == "video":
            self.image_visible = False
            self.video_visible = True
            self.video_src = item.src
            self.video_playing = True
        else:
            self.video_playing = False
            self.video_visible = False
            self.image_visible = True
            self.image_src = item.src

        self.active_index = index
        return item

    def active_flags(self) -> list[bool]:
        """Per-thumbnail active marker, in gallery order."""
        return [i == self.active_index for i in range(len(self.items))]

    @property
    def displayed(self) -> str:
        """Source of the media currently visible."""
        if self.video_visible and self.video_src:
            return self.video_src
        return self.image_src
