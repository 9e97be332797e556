"""Platform services shared by every resource handler."""
