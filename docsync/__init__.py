"""docsync: mirror repository Markdown into a Docusaurus docs directory."""
