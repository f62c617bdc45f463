"""Performance services - acquisition, matching, synthesis, scoring."""
