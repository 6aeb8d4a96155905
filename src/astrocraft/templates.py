"""Contents of newly created components, layouts, routes and pages."""

from __future__ import annotations

from .core.documents import ROUTE_IMPORT
from .core.merge import DEFAULT_WRAPPER, ItemKind
from .template import TemplateRenderer

__all__ = [
    "COMPONENT_TEMPLATE",
    "LAYOUT_TEMPLATE",
    "PAGE_TEMPLATE",
    "ROUTE_METHOD_TEMPLATE",
    "TemplateSet",
]


COMPONENT_TEMPLATE = """---
// {{ name|pascal }} component
---

<div class="{{ name|dash }}">
  <!-- Your content here -->
</div>
"""

LAYOUT_TEMPLATE = """---
// {{ name|pascal }} layout
---

<div class="{{ name|dash }}-layout">
  <slot />
</div>
"""

ROUTE_METHOD_TEMPLATE = """export const {{ method }}: APIRoute = ({ params, request }) => {
  return new Response(
    JSON.stringify({
      message: 'This is the {{ method }} method for {{ name }}'
    })
  );
};
"""

PAGE_TEMPLATE = """---
import {{ wrapper }} from '@layouts/{{ wrapper }}.astro';
{{ import_statement }}
---

<{{ wrapper }}>
  <h1>{{ page|capitalize }}</h1>
{{ usage }}
</{{ wrapper }}>
"""

COMPONENT_IMPORT_TEMPLATE = "import {{ name|pascal }} from '@components/{{ name|dash }}.astro';"
LAYOUT_IMPORT_TEMPLATE = "import {{ name|pascal }} from '@layouts/{{ name|pascal }}.astro';"

COMPONENT_USAGE_TEMPLATE = "  <{{ name|pascal }} />"
LAYOUT_USAGE_TEMPLATE = """  <{{ name|pascal }}>
    <!-- Page content -->
  </{{ name|pascal }}>"""


class TemplateSet:
    """Render the text of every file the scaffolder can create."""

    def __init__(self, renderer: TemplateRenderer | None = None, *, wrapper: str = DEFAULT_WRAPPER) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.wrapper = wrapper

    def _render(self, template: str, **context: str) -> str:
        return self.renderer.render_string(template, context)

    def component(self, name: str) -> str:
        return self._render(COMPONENT_TEMPLATE, name=name)

    def layout(self, name: str) -> str:
        return self._render(LAYOUT_TEMPLATE, name=name)

    def route_method(self, name: str, method: str) -> str:
        """Handler block for ``method``, as appended to an existing route file."""

        return self._render(ROUTE_METHOD_TEMPLATE, name=name, method=method)

    def route(self, name: str, method: str) -> str:
        return f"{ROUTE_IMPORT}\n\n{self.route_method(name, method)}"

    def page_import(self, item_kind: ItemKind | str, name: str) -> str:
        if ItemKind(item_kind) is ItemKind.COMPONENT:
            return self._render(COMPONENT_IMPORT_TEMPLATE, name=name)
        return self._render(LAYOUT_IMPORT_TEMPLATE, name=name)

    def page(self, page: str, item_kind: ItemKind | str, name: str) -> str:
        """A new page that imports and uses the ``name`` item."""

        kind = ItemKind(item_kind)
        usage_template = COMPONENT_USAGE_TEMPLATE if kind is ItemKind.COMPONENT else LAYOUT_USAGE_TEMPLATE
        return self._render(
            PAGE_TEMPLATE,
            page=page,
            wrapper=self.wrapper,
            import_statement=self.page_import(kind, name),
            usage=self._render(usage_template, name=name),
        )
