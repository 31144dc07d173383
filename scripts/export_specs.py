#!/usr/bin/env python3
"""Render component specs and the page guide for the hotel booking site."""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from export_utils import ensure_dirs, log_info, write_if_changed

PAGES_README = "README.md"
DEFAULT_BREAKPOINTS = ["desktop: 1440px", "tablet: 768px", "mobile: 375px"]


@dataclass(frozen=True)
class ComponentSpec:
    name: str
    description: str
    props: List[str] = field(default_factory=list)
    states: List[str] = field(default_factory=list)
    variants: List[str] = field(default_factory=list)

    @property
    def filename(self) -> str:
        return f"{self.name}.md"


@dataclass(frozen=True)
class PageSpec:
    name: str
    path: str
    description: str
    components: List[str] = field(default_factory=list)
    breakpoints: List[str] = field(default_factory=lambda: list(DEFAULT_BREAKPOINTS))


COMPONENTS: List[ComponentSpec] = [
    ComponentSpec(
        name="Header",
        description="Main header with site navigation",
        props=["currentPage", "onNavigate"],
        states=["default", "mobile-menu-open"],
        variants=["desktop", "mobile"],
    ),
    ComponentSpec(
        name="PaymentModal",
        description="Reusable payment modal",
        props=["isOpen", "type", "data", "onClose"],
        states=["closed", "room-booking", "service-booking"],
        variants=["default"],
    ),
    ComponentSpec(
        name="RoomCard",
        description="Room card with summary information",
        props=["room", "onViewDetails"],
        states=["default", "hover"],
        variants=["grid", "list"],
    ),
    ComponentSpec(
        name="ServiceCard",
        description="Hotel service card",
        props=["service", "onViewDetails"],
        states=["default", "hover"],
        variants=["default"],
    ),
    ComponentSpec(
        name="Footer",
        description="Footer with links and contact information",
        props=[],
        states=["default"],
        variants=["desktop", "mobile"],
    ),
]

PAGES: List[PageSpec] = [
    PageSpec(
        name="Home",
        path="/",
        description="Landing page with hero, featured rooms, services and attractions",
        components=["Header", "Hero", "FeaturedRooms", "ServicesPreview", "AttractionsPreview", "Footer"],
    ),
    PageSpec(
        name="Rooms",
        path="/rooms",
        description="Room listing with filters",
        components=["Header", "RoomCard", "Filters", "Pagination", "Footer"],
    ),
    PageSpec(
        name="Room Details",
        path="/rooms/:id",
        description="Room details with gallery and booking form",
        components=["Header", "Breadcrumb", "ImageGallery", "RoomInfo", "BookingForm", "Footer"],
    ),
    PageSpec(
        name="Services",
        path="/services",
        description="Hotel services listing",
        components=["Header", "ServiceCard", "Categories", "Footer"],
    ),
    PageSpec(
        name="Service Details",
        path="/services/:id",
        description="Service details with scheduling",
        components=["Header", "Breadcrumb", "ServiceInfo", "ScheduleForm", "Footer"],
    ),
    PageSpec(
        name="Attractions",
        path="/attractions",
        description="Local attractions and sightseeing spots",
        components=["Header", "AttractionCard", "Map", "Filters", "Footer"],
    ),
    PageSpec(
        name="Login",
        path="/login",
        description="Sign-in page",
        components=["Header", "LoginForm", "Footer"],
    ),
    PageSpec(
        name="Register",
        path="/register",
        description="Account registration page",
        components=["Header", "RegisterForm", "Footer"],
    ),
]

DESIGN_GUIDELINES = """\
## Design Guidelines
- Use Auto Layout for responsiveness
- Apply design tokens consistently
- Keep a clear visual hierarchy
- Cover interaction states (hover, active, disabled)
"""

FIGMA_COMPONENT_STEPS = """\
## Figma Components
1. Create a Component Set with variants
2. Configure boolean properties for states
3. Use Instance Swap for dynamic content
4. Apply constraints for responsiveness
"""

PAGES_FOOTER = """\
## Navigation
- Header with the main menu
- Breadcrumb on detail pages
- Footer with secondary links
- Payment modal as an overlay

## Global States
- Light/Dark mode
- Mobile menu open/closed
- Payment modal open/closed
- Pages with loading states

## Responsiveness
- Desktop-first approach
- Breakpoints: 1440px, 768px, 375px
- Responsive grid system
- Images optimised per device

## Figma Structure
```
📁 Hotel Booking System
├── 🎨 Design System
│   ├── Colors
│   ├── Typography
│   ├── Spacing
│   └── Components
├── 📱 Pages
│   ├── Home (Desktop/Tablet/Mobile)
│   ├── Rooms (Desktop/Tablet/Mobile)
│   ├── Room Details (Desktop/Tablet/Mobile)
│   ├── Services (Desktop/Tablet/Mobile)
│   ├── Service Details (Desktop/Tablet/Mobile)
│   ├── Attractions (Desktop/Tablet/Mobile)
│   ├── Login (Desktop/Tablet/Mobile)
│   └── Register (Desktop/Tablet/Mobile)
└── 🔄 Prototype
    └── Navigation Flow
```
"""


def _bullets(items: Iterable[str], code: bool = False) -> List[str]:
    return [f"- `{item}`" if code else f"- {item}" for item in items]


def render_component_spec(component: ComponentSpec) -> str:
    lines = [
        f"# {component.name}",
        "",
        "## Description",
        component.description,
        "",
        "## Props",
        *_bullets(component.props, code=True),
        "",
        "## States",
        *_bullets(component.states),
        "",
        "## Variants",
        *_bullets(component.variants),
        "",
        "## Implementation",
        "```tsx",
        f"// See: /components/{component.name}.tsx",
        "```",
        "",
    ]
    return "\n".join(lines) + "\n" + DESIGN_GUIDELINES + "\n" + FIGMA_COMPONENT_STEPS


def write_component_specs(components_dir: Path, components: Iterable[ComponentSpec] = COMPONENTS) -> List[Path]:
    log_info("Generating component specs...")
    ensure_dirs(components_dir)
    written: List[Path] = []
    for component in components:
        dest = components_dir / component.filename
        write_if_changed(dest, render_component_spec(component))
        written.append(dest)
    log_info(f"Component specs generated ({len(written)} files)")
    return written


def render_page_section(page: PageSpec) -> str:
    return "\n".join(
        [
            f"### {page.name}",
            f"- **Path:** `{page.path}`",
            f"- **Description:** {page.description}",
            f"- **Components:** {', '.join(page.components)}",
            f"- **Breakpoints:** {', '.join(page.breakpoints)}",
            "",
        ]
    )


def render_pages_guide(pages: List[PageSpec]) -> str:
    lines = [
        "# Pages Guide - Hotel Booking System",
        "",
        "## Overview",
        f"Hotel booking system with {len(pages)} main pages, all responsive and with integrated navigation.",
        "",
        "## Pages",
        "",
    ]
    lines.extend(render_page_section(page) for page in pages)
    return "\n".join(lines) + "\n" + PAGES_FOOTER


def write_pages_guide(pages_dir: Path, pages: List[PageSpec] = PAGES) -> Path:
    log_info("Generating pages guide...")
    ensure_dirs(pages_dir)
    dest = pages_dir / PAGES_README
    write_if_changed(dest, render_pages_guide(pages))
    log_info(f"Pages guide generated ({len(pages)} pages)")
    return dest


def main(argv: List[str]) -> int:
    if len(argv) != 1:
        print("usage: export_specs.py <export-dir>", file=sys.stderr)
        return 2
    out_dir = Path(argv[0])
    write_component_specs(out_dir / "components")
    write_pages_guide(out_dir / "pages")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
