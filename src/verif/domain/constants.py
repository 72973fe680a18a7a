from __future__ import annotations

"""
Domain Constants.

Centralizes file naming conventions, printer identifiers and network
defaults shared by the analysis core and the interface layers.
"""

from typing import Dict, Tuple

APP_NAME = "verif"

# Single-file component extension recognized by discovery and validation
COMPONENT_EXTENSION = ".vue"

# Tag used for the synthetic element wrapping multi-root templates
FRAGMENT_TAG = "template"

# -----------------------------------------------------------------------------
# PRINTER FORMATS
# -----------------------------------------------------------------------------
FORMAT_STDOUT = "stdout"
FORMAT_GRAPH = "graph"
FORMAT_REPORT = "report"

DEFAULT_FORMAT = FORMAT_GRAPH

# Accepted spellings mapped to canonical printer identifiers
PRINTER_FORMAT_ALIASES: Dict[str, str] = {
    "stdout": FORMAT_STDOUT,
    "console": FORMAT_STDOUT,
    "graph": FORMAT_GRAPH,
    "report": FORMAT_REPORT,
    "stats": FORMAT_REPORT,
}

# -----------------------------------------------------------------------------
# PREVIEW SERVER
# -----------------------------------------------------------------------------
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 38081
ELEMENTS_FILENAME = "elements.json"
CYTOSCAPE_CDN_URL = "https://unpkg.com/cytoscape@3.28.1/dist/cytoscape.min.js"

# -----------------------------------------------------------------------------
# DIAGNOSTICS
# -----------------------------------------------------------------------------
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS: Tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# -----------------------------------------------------------------------------
# TREE RENDERING
# -----------------------------------------------------------------------------
TREE_INDENT = "  "
TREE_CONNECTOR = "└── "

# HTML elements that never carry children (no closing tag expected)
VOID_ELEMENTS: Tuple[str, ...] = (
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
)

# -----------------------------------------------------------------------------
# RESERVED TAGS
# -----------------------------------------------------------------------------
# Native HTML/SVG elements and framework built-ins never resolve to
# user components, even when a component shares their name ('button' vs
# Button.vue).
HTML_TAGS = frozenset((
    "html,body,base,head,link,meta,style,title,"
    "address,article,aside,footer,header,h1,h2,h3,h4,h5,h6,hgroup,nav,section,"
    "div,dd,dl,dt,figcaption,figure,picture,hr,img,li,main,ol,p,pre,ul,"
    "a,b,abbr,bdi,bdo,br,cite,code,data,dfn,em,i,kbd,mark,q,rp,rt,rtc,ruby,"
    "s,samp,small,span,strong,sub,sup,time,u,var,wbr,area,audio,map,track,video,"
    "embed,object,param,source,canvas,script,noscript,del,ins,"
    "caption,col,colgroup,table,thead,tbody,td,th,tr,"
    "button,datalist,fieldset,form,input,label,legend,meter,optgroup,option,"
    "output,progress,select,textarea,"
    "details,dialog,menu,menuitem,summary,"
    "content,element,shadow,template,blockquote,iframe,tfoot"
).split(","))

SVG_TAGS = frozenset((
    "svg,animate,circle,clippath,cursor,defs,desc,ellipse,filter,font-face,"
    "foreignObject,g,glyph,image,line,marker,mask,missing-glyph,path,pattern,"
    "polygon,polyline,rect,switch,symbol,text,textpath,tspan,use,view"
).split(","))

BUILTIN_TAGS = frozenset(("slot", "component"))

RESERVED_TAGS = HTML_TAGS | SVG_TAGS | BUILTIN_TAGS
