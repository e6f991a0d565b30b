from django import forms
from blog.models import Comment

class CommentForm(forms.ModelForm):
    """Form for creating comments on posts."""

    class Meta:
        """Model and field config for comments."""
        model = Comment
        fields = ['content']
        widgets = {
            'content': forms.Textarea(attrs={
                'rows': 2,
                'placeholder': 'Add a comment...',
            }),
        }
