"""HTTP surface for the document extraction system."""
