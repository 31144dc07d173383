#!/usr/bin/env python3
"""Write the navigation flow document and the Figma import guide."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

from export_utils import dump_json, ensure_dirs, log_info, log_warn, write_if_changed

NAVIGATION_FLOW_JSON = "navigation-flow.json"
IMPORT_GUIDE_MD = "IMPORT-GUIDE.md"

NAVIGATION_FLOW: Dict[str, Any] = {
    "title": "Hotel Booking - Navigation Flow",
    "startNode": "home",
    "nodes": {
        "home": {
            "title": "Home",
            "type": "page",
            "connections": ["rooms", "services", "attractions", "login"],
        },
        "rooms": {
            "title": "Rooms List",
            "type": "page",
            "connections": ["home", "room-details", "login"],
        },
        "room-details": {
            "title": "Room Details",
            "type": "page",
            "connections": ["rooms", "payment-modal"],
        },
        "services": {
            "title": "Services List",
            "type": "page",
            "connections": ["home", "service-details", "login"],
        },
        "service-details": {
            "title": "Service Details",
            "type": "page",
            "connections": ["services", "payment-modal"],
        },
        "attractions": {
            "title": "Attractions",
            "type": "page",
            "connections": ["home"],
        },
        "login": {
            "title": "Login",
            "type": "page",
            "connections": ["register", "home"],
        },
        "register": {
            "title": "Register",
            "type": "page",
            "connections": ["login", "home"],
        },
        "payment-modal": {
            "title": "Payment Modal",
            "type": "overlay",
            "connections": ["room-details", "service-details"],
        },
    },
    "interactions": [
        {
            "from": "home",
            "to": "rooms",
            "trigger": "header-nav",
            "animation": "navigate",
        },
        {
            "from": "room-details",
            "to": "payment-modal",
            "trigger": "book-now-button",
            "animation": "modal-overlay",
        },
    ],
}

IMPORT_GUIDE = """\
# 🎨 Figma Import Guide

## 📋 Preparation Checklist

### 1. Capture Screenshots
```bash
# Install dependencies
npm install puppeteer

# Run the capture
node scripts/capture-screens.js

# Check exports/screenshots/
```

### 2. Prepare Assets
- ✅ Screenshots of every page
- ✅ Design tokens exported
- ✅ Component specs
- ✅ Navigation flow

## 🚀 Importing into Figma

### Option 1: "HTML/CSS to Figma" plugin
1. **Install the plugin** in Figma
2. **Open a new** Figma file
3. **Run the plugin** and paste each page's HTML/CSS
4. **Organise frames** by breakpoint

### Option 2: Manual with screenshots
1. **Create a new** Figma file
2. **Import screenshots** by drag & drop
3. **Organise into frames** (1440x900, 768x1024, 375x812)
4. **Rebuild components** using the screenshots as reference

### Option 3: "Figma from Code" plugin
1. **Connect the GitHub repository** to the plugin
2. **Map React components** to Figma
3. **Import the structure** automatically
4. **Adjust styling** as needed

## 🎨 Design System Setup

### 1. Import Variables
```
Figma → Libraries → Variables → Import
File: exports/figma-ready/tokens/figma-variables.json
```

### 2. Create Components
- Use **Component Sets** for variants
- Configure **Properties** for states
- Apply **Auto Layout** for responsiveness
- Use **Constraints** for different sizes

### 3. Organise the Library
```
📁 Hotel Booking System
├── 🎨 Foundations
│   ├── Colors
│   ├── Typography
│   ├── Spacing
│   └── Effects
├── 🧩 Components
│   ├── Header
│   ├── Footer
│   ├── Cards
│   ├── Forms
│   └── Modals
└── 📱 Templates
    ├── Home
    ├── Rooms
    ├── Services
    └── Auth
```

## 🔄 Prototype Setup

### 1. Connections
- **Smart Animate** between pages
- **Overlay** for modals
- **Scroll** for long pages

### 2. Interactions
```
Header Navigation:
Home → On Click → Navigate to → Rooms

Book Now Button:
Room Details → On Click → Open Overlay → Payment Modal

Mobile Menu:
Header → On Click → Smart Animate → Mobile Menu Open
```

### 3. Device Frames
- **Desktop**: 1440x900
- **Tablet**: 768x1024
- **Mobile**: 375x812

## 📱 Responsiveness

### Auto Layout Settings
- **Direction**: Vertical for pages
- **Spacing**: Between elements (8px, 16px, 24px)
- **Padding**: Inside containers (16px, 24px, 32px)
- **Resizing**: Fill container for width

### Constraints
- **Header**: Fixed top
- **Footer**: Fixed bottom
- **Content**: Scale for height
- **Sidebar**: Fixed left (if applicable)

## 🎯 Wrap-up

### 1. Test the Prototype
- [ ] Navigation between pages works
- [ ] Responsive at different sizes
- [ ] Modals open/close correctly
- [ ] Hover/active states applied

### 2. Document
- [ ] Add descriptions to components
- [ ] Document complex interactions
- [ ] Create a style guide page
- [ ] Configure sharing settings

### 3. Share
- [ ] Publish the library if needed
- [ ] Configure permissions
- [ ] Generate a prototype link
- [ ] Test on different devices

## 🔗 Useful Links

- [Figma Dev Mode](https://help.figma.com/hc/en-us/articles/15023124644247)
- [Auto Layout Guide](https://help.figma.com/hc/en-us/articles/5731482952599)
- [Prototyping in Figma](https://help.figma.com/hc/en-us/articles/360040314193)
- [Component Properties](https://help.figma.com/hc/en-us/articles/5579474826519)

## ✨ Tips & Tricks

### Performance
- Use **Instance Swap** for dynamic content
- Optimise **images** before importing
- Minimise unnecessary **overlaps**

### Maintenance
- Keep **naming consistent**
- Use **description fields** for documentation
- Set up **version control** for large changes

### Collaboration
- Use **comments** for feedback
- Configure **branch review** if needed
- Document **handoff specs** for development
"""


def find_dangling_connections(flow: Dict[str, Any]) -> List[Tuple[str, str]]:
    """Return (node, target) pairs whose target is not a declared node id."""
    nodes = flow.get("nodes", {})
    dangling: List[Tuple[str, str]] = []
    for node_id, node in nodes.items():
        for target in node.get("connections", []):
            if target not in nodes:
                dangling.append((node_id, target))
    return dangling


def write_navigation_flow(output_dir: Path, flow: Dict[str, Any] = NAVIGATION_FLOW) -> Path:
    log_info("Generating navigation flow...")
    # Reported only; the flow is written exactly as declared.
    for node_id, target in find_dangling_connections(flow):
        log_warn(f"navigation node '{node_id}' links to undeclared node '{target}'")
    ensure_dirs(output_dir)
    dest = output_dir / NAVIGATION_FLOW_JSON
    write_if_changed(dest, dump_json(flow))
    log_info(f"Navigation flow generated ({len(flow.get('nodes', {}))} nodes)")
    return dest


def write_import_guide(output_dir: Path) -> Path:
    log_info("Generating import guide...")
    ensure_dirs(output_dir)
    dest = output_dir / IMPORT_GUIDE_MD
    write_if_changed(dest, IMPORT_GUIDE)
    log_info("Import guide generated")
    return dest


def main(argv: List[str]) -> int:
    if len(argv) != 1:
        print("usage: export_flow.py <export-dir>", file=sys.stderr)
        return 2
    out_dir = Path(argv[0])
    write_navigation_flow(out_dir)
    write_import_guide(out_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
