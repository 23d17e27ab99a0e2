"""Registry of static documentation resources."""

from playvideo_mcp.application.services import documents
from playvideo_mcp.domain.exceptions import ResourceNotFoundError
from playvideo_mcp.domain.models.catalog import ResourceDescriptor

RESOURCES: tuple[tuple[ResourceDescriptor, str], ...] = (
    (
        ResourceDescriptor(
            uri="playvideo://docs/quickstart",
            name="Quick Start Guide",
            description="How to get started with PlayVideo API",
        ),
        documents.QUICKSTART,
    ),
    (
        ResourceDescriptor(
            uri="playvideo://docs/api",
            name="API Reference",
            description="Complete API documentation",
        ),
        documents.API_REFERENCE,
    ),
    (
        ResourceDescriptor(
            uri="playvideo://docs/sdks",
            name="SDK Installation",
            description="How to install and use PlayVideo SDKs",
        ),
        documents.SDKS,
    ),
    (
        ResourceDescriptor(
            uri="playvideo://docs/webhooks",
            name="Webhooks Guide",
            description="How to set up and verify webhooks",
        ),
        documents.WEBHOOKS,
    ),
)


class ResourceRegistry:
    """Fixed set of markdown documents addressed by URI.

    The only variable part is the API root substituted into the examples,
    fixed at construction.
    """

    def __init__(self, api_url: str) -> None:
        """Initialize the registry.

        Args:
            api_url: API root shown in examples, e.g.
                ``https://api.playvideo.dev/api/v1``.
        """
        self._descriptors = tuple(descriptor for descriptor, _ in RESOURCES)
        self._texts = {
            descriptor.uri: template.replace("{api_url}", api_url)
            for descriptor, template in RESOURCES
        }

    def list_resources(self) -> tuple[ResourceDescriptor, ...]:
        """All resource descriptors, in a stable order."""
        return self._descriptors

    def get(self, uri: str) -> ResourceDescriptor:
        """Descriptor for ``uri``.

        Raises:
            ResourceNotFoundError: If the URI is unknown.
        """
        for descriptor in self._descriptors:
            if descriptor.uri == uri:
                return descriptor
        raise ResourceNotFoundError(uri)

    def read_resource(self, uri: str) -> str:
        """Markdown body for ``uri``.

        Raises:
            ResourceNotFoundError: If the URI is unknown.
        """
        try:
            return self._texts[uri]
        except KeyError:
            raise ResourceNotFoundError(uri) from None
