"""Data models for lumi-kit.

Import from submodules:
- agent: AgentDefinition, AgentMetadata, AgentPersona, MenuItem
- manifest: Manifest, ModuleRecord, PlatformRecord, PlatformFormat, FrontmatterRequirement
- config: LumiConfig
"""
