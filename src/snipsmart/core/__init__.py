"""snipsmart core components.

The core consists of:
- Result / Status: The three-state outcome shared by every engine
- SnipOptions: Format and tag case-folding configuration
- SnipSmartError: Exception raised by the strict wrapper
- Snipper: Registry dispatching format names to engines

Typical usage:
    from snipsmart.core.app import snip_smart

    result = snip_smart(llm_output, "json")
    if result.ok:
        use(result.data)
"""
