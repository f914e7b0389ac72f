"""iHeartRadio station directory integration."""

from iheart_radio_extension.infrastructure.iheart.extension import IHeartRadioExtension

__all__ = ["IHeartRadioExtension"]
