"""Framework-free selection and filtering logic."""
