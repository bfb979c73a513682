"""Custom image descriptor and its builder.

The API renders ``base`` first (it also sets the canvas size), then ``images``
and finally ``texts``, each in the order they were added.
"""

from __future__ import annotations

from typing import List, Tuple

from pydantic import ConfigDict, model_validator

from fluxpoint.core.checks import not_null
from fluxpoint.image.drawables import Drawable, DrawableBase
from fluxpoint.image.model import PayloadModel
from fluxpoint.image.texts import Text, TextBase


class CustomImage(PayloadModel):
    model_config = ConfigDict(frozen=True)

    base: Drawable
    images: Tuple[Drawable, ...] = ()
    texts: Tuple[Text, ...] = ()

    @model_validator(mode="after")
    def _seal_layers(self) -> "CustomImage":
        self.base._seal()
        for layer in (*self.images, *self.texts):
            layer._seal()
        return self

    def _require_complete(self) -> None:
        self.base._require_complete()
        for image in self.images:
            image._require_complete()
        for text in self.texts:
            text._require_complete()


class CustomImageBuilder:
    def __init__(self, base: DrawableBase) -> None:
        not_null(base, "Base image")
        self._base = base
        self._images: List[DrawableBase] = []
        self._texts: List[TextBase] = []

    @classmethod
    def create_base(cls, base: DrawableBase) -> "CustomImageBuilder":
        return cls(base)

    def add_image(self, image: DrawableBase) -> "CustomImageBuilder":
        not_null(image, "Image")
        self._images.append(image)
        return self

    def add_text(self, text: TextBase) -> "CustomImageBuilder":
        not_null(text, "Text")
        self._texts.append(text)
        return self

    def build(self) -> CustomImage:
        return CustomImage(
            base=self._base.model_copy(deep=True),
            images=tuple(image.model_copy(deep=True) for image in self._images),
            texts=tuple(text.model_copy(deep=True) for text in self._texts),
        )
