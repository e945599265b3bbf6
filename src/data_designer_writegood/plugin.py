from data_designer.plugins.plugin import Plugin, PluginType

writegood_plugin = Plugin(
    config_qualified_name="data_designer_writegood.config.WritegoodColumnConfig",
    impl_qualified_name="data_designer_writegood.generator.WritegoodColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
