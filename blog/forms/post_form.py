from django import forms
from blog.models import Post


class PostForm(forms.ModelForm):
    """Title plus Markdown body for creating or editing a post."""

    class Meta:
        model = Post
        fields = ["title", "content"]
        labels = {"content": "Content (Markdown)"}
        widgets = {
            "content": forms.Textarea(attrs={"rows": 16}),
        }

    def clean_title(self):
        title = (self.cleaned_data.get("title") or "").strip()
        if not title:
            raise forms.ValidationError("Title is required.")
        return title

    def clean_content(self):
        content = (self.cleaned_data.get("content") or "").strip()
        if not content:
            raise forms.ValidationError("Content is required.")
        return content
