"""
Example usage of the glideschema library.
"""

from glideschema import ColumnDescriptor, PandasConverter, construct_schema


def main():
    """Demonstrate glideschema library usage."""
    columns = [
        ColumnDescriptor("sys_id", "GUID"),
        ColumnDescriptor("number", "string"),
        ColumnDescriptor("priority", "integer"),
        ColumnDescriptor("active", "boolean"),
        ColumnDescriptor("opened_at", "glide_date_time"),
        ColumnDescriptor("", "string"),
        ColumnDescriptor("business_duration", "glide_time"),
        ColumnDescriptor("cost", "decimal"),
    ]

    schema = construct_schema("incident", columns)
    print(f"Schema '{schema.name}' with {len(schema)} fields: {schema.field_names}")

    print("\nAvro record:")
    print(schema.to_json(indent=2))

    print("\npandas dtypes:")
    print(PandasConverter().empty_frame(schema).dtypes)


if __name__ == "__main__":
    main()
