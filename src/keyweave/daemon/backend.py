from __future__ import annotations

import logging
from typing import List

from keyweave.binds.config import BasicRemapping, Layer, Profile, Remapping, SequenceRemapping
from keyweave.binds.errors import UnimplementedError
from keyweave.binds.render import describe_bind

from .lowering import to_ll
from .models.profile import LLBasicRemapping, LLLayer, LLProfile, LLRemapping, LLSequenceRemapping

logger = logging.getLogger(__name__)


class DaemonBackend:
    """Compile a Profile into the daemon's low-level profile document."""

    def __init__(self, *, skip_unlowerable: bool = False) -> None:
        self._skip_unlowerable = skip_unlowerable

    def compile(self, profile: Profile) -> LLProfile:
        layers = [self._lower_layer(layer) for layer in profile.layers]
        logger.debug(
            "Compiled profile %r: %d layer(s), %d remapping(s)",
            profile.profile_name,
            len(layers),
            sum(len(layer.remappings) for layer in layers),
        )
        return LLProfile(
            profile_name=profile.profile_name,
            default_layer=profile.default_layer,
            layers=layers,
        )

    def _lower_layer(self, layer: Layer) -> LLLayer:
        remappings: List[LLRemapping] = []
        for remapping in layer.remappings:
            try:
                remappings.append(_lower_remapping(remapping))
            except UnimplementedError:
                if not self._skip_unlowerable:
                    raise
                logger.warning(
                    "Skipping remapping in layer %r: %s cannot be lowered",
                    layer.layer_name,
                    describe_bind(remapping.bind),
                )
        return LLLayer(layer_name=layer.layer_name, remappings=remappings)


def _lower_remapping(remapping: Remapping) -> LLRemapping:
    binds = to_ll(remapping.bind)
    if isinstance(remapping, BasicRemapping):
        return LLBasicRemapping(trigger=remapping.trigger, binds=binds)
    if isinstance(remapping, SequenceRemapping):
        return LLSequenceRemapping(
            triggers=list(remapping.triggers),
            binds=binds,
            behavior=remapping.behavior,
        )
    raise ValueError(f"unsupported remapping: {remapping!r}")
