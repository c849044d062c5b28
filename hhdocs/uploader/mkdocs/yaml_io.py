# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Stacklet, Inc.
#

"""
YAML loading and dumping for MkDocs configuration files.

MkDocs configs commonly use tags the safe loader rejects, such as
``!!python/name:material.extensions.emoji.twemoji`` or ``!ENV``. They're kept
as opaque TaggedValue objects and written back with the same tag.
"""

from dataclasses import dataclass
from typing import Any

import yaml


@dataclass(frozen=True)
class TaggedValue:
    """A YAML node with a tag that is preserved but not interpreted."""

    tag: str
    value: Any


class MkDocsLoader(yaml.SafeLoader):
    """Safe loader that keeps unknown tags."""


class MkDocsDumper(yaml.SafeDumper):
    """Safe dumper that writes back tags kept by MkDocsLoader."""


def _construct_tagged(loader: MkDocsLoader, tag_suffix: str, node: yaml.Node) -> TaggedValue:
    value: Any
    if isinstance(node, yaml.ScalarNode):
        value = loader.construct_scalar(node)
    elif isinstance(node, yaml.SequenceNode):
        value = loader.construct_sequence(node, deep=True)
    else:
        value = loader.construct_mapping(node, deep=True)  # type: ignore[arg-type]
    return TaggedValue(tag=node.tag, value=value)


def _represent_tagged(dumper: MkDocsDumper, data: TaggedValue) -> yaml.Node:
    if isinstance(data.value, list):
        return dumper.represent_sequence(data.tag, data.value)
    if isinstance(data.value, dict):
        return dumper.represent_mapping(data.tag, data.value)
    return dumper.represent_scalar(data.tag, data.value)


MkDocsLoader.add_multi_constructor("!", _construct_tagged)
MkDocsLoader.add_multi_constructor("tag:yaml.org,2002:python/", _construct_tagged)
MkDocsDumper.add_representer(TaggedValue, _represent_tagged)


def load(text: str) -> Any:
    return yaml.load(text, Loader=MkDocsLoader)


def dump(data: Any) -> str:
    return yaml.dump(
        data,
        Dumper=MkDocsDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
