# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Binding resolver.

Formal Invariant:
    Every consumer declaration produces exactly one binding or is reported
    as unresolved. A binding never has an empty channel or endpoint name.

Resolution Tiers (strict precedence, first success wins):
    1. EXPLICIT - the consumer's own ``Consumer(channel, endpoint)`` marker,
       used verbatim. A missing endpoint becomes the default endpoint.
    2. STRUCTURAL - a member of an event group matching the consumed message
       type (see ``StructuralMatcher``). The channel is the member's entity
       name, falling back to its channel marker.
    3. INFERRED - the channel is inferred from the consumed message type's
       simple name (see ``infer_channel_name``).

    An explicit subscription override (``ConsumerSubscription``/``QueueName``)
    replaces the default endpoint in every tier.

Ambiguity:
    Several equally ranked structural candidates are resolved by the
    configured ``EnumAmbiguityPolicy``: FIRST_MATCH takes the first candidate
    in declaration order and reports a warning, STRICT reports an error and
    leaves the consumer unresolved.

Determinism:
    Bindings are sorted by (consumer identity, message type identity), so
    repeated passes over the same graph return identical lists regardless
    of input order. The resolver keeps no state between calls.
"""

from __future__ import annotations

from collections.abc import Iterable

from omnibase_buswire.enums import (
    EnumAmbiguityPolicy,
    EnumDiagnosticCode,
    EnumDiagnosticSeverity,
    EnumResolutionTier,
)
from omnibase_buswire.errors import (
    AmbiguousStructuralMatchError,
    GeneratorConfigurationError,
    ModelBuswireErrorContext,
    UnresolvableConsumerError,
)
from omnibase_buswire.models import (
    ModelBinding,
    ModelConsumerDeclaration,
    ModelDiagnostic,
    ModelEventGroup,
    ModelMessageDeclaration,
    ModelResolutionResult,
)
from omnibase_buswire.resolution.structural_matcher import StructuralMatcher
from omnibase_buswire.resolution.util_channel_naming import (
    default_endpoint_name,
    infer_channel_name,
)


class BindingResolver:
    """Binds every consumer declaration to one logical channel.

    Args:
        service_name: Opaque service name used for default endpoint names.
        ambiguity_policy: Tie-break policy for ambiguous structural matches.

    Raises:
        GeneratorConfigurationError: If ``service_name`` is blank.

    Example:
        >>> resolver = BindingResolver("account-service")
        >>> result = resolver.resolve(collected.messages, collected.consumers)
        >>> result.bindings[0].endpoint_name
        'account-service-subscription'
    """

    def __init__(
        self,
        service_name: str,
        ambiguity_policy: EnumAmbiguityPolicy = EnumAmbiguityPolicy.FIRST_MATCH,
    ) -> None:
        if not service_name or not service_name.strip():
            raise GeneratorConfigurationError(
                "Service name cannot be empty",
                context=ModelBuswireErrorContext(operation="resolve"),
            )
        self._service_name = service_name.strip()
        self._ambiguity_policy = ambiguity_policy

    @property
    def service_name(self) -> str:
        return self._service_name

    @property
    def default_endpoint(self) -> str:
        """Endpoint name used when no explicit endpoint is declared."""
        return default_endpoint_name(self._service_name)

    def resolve(
        self,
        messages: Iterable[ModelMessageDeclaration],
        consumers: Iterable[ModelConsumerDeclaration],
    ) -> ModelResolutionResult:
        """Resolve bindings for all consumers.

        Args:
            messages: Collected message declarations.
            consumers: Collected consumer declarations.

        Returns:
            Sorted bindings, unresolved consumers and diagnostics.
        """
        messages = tuple(messages)
        consumers = tuple(consumers)
        diagnostics: list[ModelDiagnostic] = []

        if not messages and not consumers:
            diagnostics.append(
                ModelDiagnostic(
                    code=EnumDiagnosticCode.EMPTY_INPUT,
                    severity=EnumDiagnosticSeverity.INFO,
                    message="No message or consumer declarations found; nothing to configure",
                )
            )
            return ModelResolutionResult(diagnostics=tuple(diagnostics))

        matcher = StructuralMatcher(ModelEventGroup.build_groups(messages))
        bindings: list[ModelBinding] = []
        unresolved: list[ModelConsumerDeclaration] = []

        for consumer in consumers:
            try:
                bindings.append(self._resolve_consumer(consumer, matcher, diagnostics))
            except AmbiguousStructuralMatchError as e:
                unresolved.append(consumer)
                diagnostics.append(
                    ModelDiagnostic.from_error(
                        EnumDiagnosticCode.AMBIGUOUS_STRUCTURAL_MATCH,
                        EnumDiagnosticSeverity.ERROR,
                        e,
                        subject=consumer.identity,
                    )
                )
            except UnresolvableConsumerError as e:
                unresolved.append(consumer)
                diagnostics.append(
                    ModelDiagnostic.from_error(
                        EnumDiagnosticCode.UNRESOLVABLE_CONSUMER,
                        EnumDiagnosticSeverity.ERROR,
                        e,
                        subject=consumer.identity,
                    )
                )

        return ModelResolutionResult(
            bindings=tuple(sorted(bindings, key=lambda binding: binding.sort_key)),
            unresolved=tuple(
                sorted(unresolved, key=lambda item: (item.identity, item.message_type))
            ),
            diagnostics=tuple(diagnostics),
        )

    def _resolve_consumer(
        self,
        consumer: ModelConsumerDeclaration,
        matcher: StructuralMatcher,
        diagnostics: list[ModelDiagnostic],
    ) -> ModelBinding:
        endpoint = consumer.subscription_name or self.default_endpoint

        if consumer.has_explicit_channel:
            return self._binding(
                consumer,
                channel_name=consumer.channel_name or "",
                endpoint_name=consumer.endpoint_name or endpoint,
                tier=EnumResolutionTier.EXPLICIT,
            )

        member = self._structural_member(consumer, matcher, diagnostics)
        if member is not None:
            return self._binding(
                consumer,
                channel_name=member.logical_channel,
                endpoint_name=endpoint,
                tier=EnumResolutionTier.STRUCTURAL,
            )

        return self._binding(
            consumer,
            channel_name=infer_channel_name(consumer.message_type),
            endpoint_name=endpoint,
            tier=EnumResolutionTier.INFERRED,
        )

    def _structural_member(
        self,
        consumer: ModelConsumerDeclaration,
        matcher: StructuralMatcher,
        diagnostics: list[ModelDiagnostic],
    ) -> ModelMessageDeclaration | None:
        candidates = matcher.candidates(consumer.message_type)
        if not candidates:
            return None
        if len(candidates) == 1:
            return candidates[0]

        candidate_ids = tuple(candidate.identity for candidate in candidates)
        if self._ambiguity_policy is EnumAmbiguityPolicy.STRICT:
            raise AmbiguousStructuralMatchError(
                f"Message type matches {len(candidates)} event group members",
                message_type_identity=consumer.message_type,
                candidates=candidate_ids,
                context=ModelBuswireErrorContext(
                    operation="resolve", target_name=consumer.identity
                ),
            )

        diagnostics.append(
            ModelDiagnostic(
                code=EnumDiagnosticCode.AMBIGUOUS_STRUCTURAL_MATCH,
                severity=EnumDiagnosticSeverity.WARNING,
                message=(
                    f"Message type {consumer.message_type} matches "
                    f"{', '.join(candidate_ids)}; using {candidate_ids[0]}"
                ),
                subject=consumer.identity,
            )
        )
        return candidates[0]

    def _binding(
        self,
        consumer: ModelConsumerDeclaration,
        *,
        channel_name: str,
        endpoint_name: str,
        tier: EnumResolutionTier,
    ) -> ModelBinding:
        if not channel_name:
            raise UnresolvableConsumerError(
                f"{tier.value} resolution produced an empty channel name",
                consumer_identity=consumer.identity,
                message_type_identity=consumer.message_type,
                context=ModelBuswireErrorContext(
                    operation="resolve", target_name=consumer.identity
                ),
            )
        return ModelBinding(
            consumer_identity=consumer.identity,
            message_type_identity=consumer.message_type,
            channel_name=channel_name,
            endpoint_name=endpoint_name,
            resolution_tier=tier,
        )


def resolve(
    messages: Iterable[ModelMessageDeclaration],
    consumers: Iterable[ModelConsumerDeclaration],
    service_name: str,
    ambiguity_policy: EnumAmbiguityPolicy = EnumAmbiguityPolicy.FIRST_MATCH,
) -> ModelResolutionResult:
    """Resolve bindings with a one-off resolver."""
    return BindingResolver(service_name, ambiguity_policy).resolve(messages, consumers)


__all__: list[str] = ["BindingResolver", "resolve"]
